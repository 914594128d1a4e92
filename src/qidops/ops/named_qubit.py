"""
********************************************************************************
* Copyright (c) 2025 the qidops authors
*
* This program and the accompanying materials are made available under the
* terms of the Eclipse Public License 2.0 which is available at
* http://www.eclipse.org/legal/epl-2.0.
*
* This Source Code may also be made available under the following Secondary
* Licenses when the conditions for such availability set forth in the Eclipse
* Public License, v. 2.0 are satisfied: GNU General Public License, version 2
* with the GNU Classpath Exception which is
* available at https://www.gnu.org/software/classpath/license.html.
*
* SPDX-License-Identifier: EPL-2.0 OR GPL-2.0 WITH Classpath-exception-2.0
********************************************************************************
"""

import re

from qidops.ops.qid import Qid, validate_dimension

# Digit runs are padded so that "q2" is ordered before "q10". The length of the
# run is kept so that "q2" and "q02" stay distinct.
_DIGIT_RUN = re.compile(r"\d+")


def _pad_digits(text):
    return _DIGIT_RUN.sub(
        lambda match: match.group().zfill(20) + ":" + str(len(match.group())), text
    )


class NamedQid(Qid):
    """
    A Qid identified by a name.

    Parameters
    ----------
    name : str
        The name of the Qid.
    dimension : int
        The dimension of the Qid.

    Examples
    --------

    >>> from qidops import NamedQid
    >>> qutrit = NamedQid("anc", dimension=3)
    >>> qutrit
    NamedQid('anc', dimension=3)
    >>> sorted([NamedQid("q10", 3), NamedQid("q2", 3)])
    [NamedQid('q2', dimension=3), NamedQid('q10', dimension=3)]

    """

    __slots__ = ("_name", "_dimension")

    def __init__(self, name, dimension):
        if not isinstance(name, str):
            raise TypeError(
                f"Tried to create a NamedQid with name of type {type(name)} (required is str)"
            )
        self._name = name
        self._dimension = validate_dimension(dimension)

    @property
    def name(self):
        return self._name

    @property
    def dimension(self):
        return self._dimension

    def _comparison_key(self):
        return f"named {_pad_digits(self._name)} (d={self._dimension})"

    def with_dimension(self, dimension):
        dimension = validate_dimension(dimension)
        if dimension == self._dimension:
            return self.copy()
        return NamedQid(self._name, dimension)

    def __str__(self):
        return f"{self._name} (d={self._dimension})"

    def __repr__(self):
        return f"NamedQid({self._name!r}, dimension={self._dimension})"


class NamedQubit(NamedQid):
    """
    A two-level Qid identified by a name.

    Examples
    --------

    >>> from qidops import NamedQubit
    >>> NamedQubit.range(3, prefix="qb_")
    [NamedQubit('qb_0'), NamedQubit('qb_1'), NamedQubit('qb_2')]

    """

    __slots__ = ()

    def __init__(self, name):
        super().__init__(name, 2)

    @staticmethod
    def range(*args, prefix=""):
        """
        Returns a list of NamedQubits named ``prefix + str(i)`` for every ``i`` in
        ``range(*args)``.
        """
        return [NamedQubit(prefix + str(i)) for i in range(*args)]

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"NamedQubit({self._name!r})"
