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

from qidops.misc.utility import as_integer
from qidops.ops.qid import Qid, validate_dimension

# Line positions can be negative, the offset keeps the comparison keys in
# numerical order
_KEY_OFFSET = 2**63


class LineQid(Qid):
    """
    A Qid on a one dimensional lattice, identified by its integer position ``x``.

    Parameters
    ----------
    x : int
        The position on the line.
    dimension : int
        The dimension of the Qid.

    Examples
    --------

    >>> from qidops import LineQid
    >>> LineQid.range(2, dimension=3)
    [LineQid(0, dimension=3), LineQid(1, dimension=3)]
    >>> LineQid.for_qid_shape((2, 3))
    [LineQid(0, dimension=2), LineQid(1, dimension=3)]

    """

    __slots__ = ("_x", "_dimension")

    def __init__(self, x, dimension):
        x = as_integer(x)
        if not -_KEY_OFFSET <= x < _KEY_OFFSET:
            raise ValueError(f"Line position {x} is out of range")
        self._x = x
        self._dimension = validate_dimension(dimension)

    @property
    def x(self):
        return self._x

    @property
    def dimension(self):
        return self._dimension

    def _comparison_key(self):
        return f"line {self._x + _KEY_OFFSET:020d} (d={self._dimension})"

    def with_dimension(self, dimension):
        dimension = validate_dimension(dimension)
        if dimension == self._dimension:
            return self.copy()
        return LineQid(self._x, dimension)

    @staticmethod
    def range(*args, dimension):
        """
        Returns a list of LineQids with the given dimension at the positions
        ``range(*args)``.
        """
        return [LineQid(i, dimension) for i in range(*args)]

    @staticmethod
    def for_qid_shape(qid_shape, start=0, step=1):
        """
        Returns one LineQid per entry of ``qid_shape``, with matching dimensions.
        """
        return [
            LineQid(start + step * i, dimension) for i, dimension in enumerate(qid_shape)
        ]

    def __str__(self):
        return f"q({self._x}) (d={self._dimension})"

    def __repr__(self):
        return f"LineQid({self._x}, dimension={self._dimension})"


class LineQubit(LineQid):
    """
    A two-level Qid on a one dimensional lattice.

    Examples
    --------

    >>> from qidops import LineQubit
    >>> q0, q1 = LineQubit.range(2)
    >>> q0 < q1
    True
    >>> LineQubit(-1) < q0
    True

    """

    __slots__ = ()

    def __init__(self, x):
        super().__init__(x, 2)

    @staticmethod
    def range(*args):
        return [LineQubit(i) for i in range(*args)]

    def __str__(self):
        return f"q({self._x})"

    def __repr__(self):
        return f"LineQubit({self._x})"
