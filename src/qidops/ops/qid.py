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

import copy
import warnings
from abc import ABC, abstractmethod

from qidops.misc.utility import as_integer
from qidops.ops.errors import InvalidDimensionError


def validate_dimension(dimension):
    """
    Checks that a dimension is a positive integer.

    Parameters
    ----------
    dimension : int
        The dimension to check.

    Raises
    ------
    InvalidDimensionError
        The dimension is not an integer or smaller than 1.

    Returns
    -------
    int
        The dimension as a Python int.

    """
    try:
        dimension = as_integer(dimension)
    except TypeError:
        raise InvalidDimensionError(dimension) from None

    if dimension < 1:
        raise InvalidDimensionError(dimension)

    return dimension


class Qid(ABC):
    """
    Identifies a quantum object such as a qubit, qutrit or resonator.

    Qids are identified by their comparison key. Equality, hashing and ordering
    are determined by this string only, which gives a deterministic total order
    across different Qid implementations. New kinds of qids are created by
    inheriting from this class and implementing ``_comparison_key`` and
    ``dimension``.

    Examples
    --------

    >>> from qidops import Qid
    >>> class Resonator(Qid):
    ...     def __init__(self, label, dimension):
    ...         self.label = label
    ...         self._dimension = Qid.validate_dimension(dimension)
    ...     def _comparison_key(self):
    ...         return "resonator_" + self.label
    ...     @property
    ...     def dimension(self):
    ...         return self._dimension
    >>> Resonator("r0", 10) == Resonator("r0", 3)
    True

    """

    __slots__ = ()

    validate_dimension = staticmethod(validate_dimension)

    @abstractmethod
    def _comparison_key(self):
        """
        Returns the string used for equality and ordering of this Qid.
        """

    @property
    @abstractmethod
    def dimension(self):
        """
        The number of quantum levels of this Qid, e.g. 2 for a qubit.
        """

    def comparison_key(self):
        return self._comparison_key()

    def with_dimension(self, dimension):
        """
        Returns a Qid identifying the same quantum object with a different dimension.

        Parameters
        ----------
        dimension : int
            The dimension of the returned Qid.

        Raises
        ------
        InvalidDimensionError
            The dimension is not a positive integer.

        Returns
        -------
        Qid
            A copy of this Qid if the dimension doesn't change, otherwise a
            QubitAsQid wrapping this Qid.

        """
        dimension = validate_dimension(dimension)
        if dimension == self.dimension:
            return self.copy()
        return QubitAsQid(self, dimension)

    def copy(self):
        return copy.copy(self)

    def __eq__(self, other):
        if not isinstance(other, Qid):
            return NotImplemented
        return self.comparison_key() == other.comparison_key()

    def __ne__(self, other):
        if not isinstance(other, Qid):
            return NotImplemented
        return self.comparison_key() != other.comparison_key()

    def __lt__(self, other):
        if not isinstance(other, Qid):
            return NotImplemented
        return self.comparison_key() < other.comparison_key()

    def __le__(self, other):
        if not isinstance(other, Qid):
            return NotImplemented
        return self.comparison_key() <= other.comparison_key()

    def __gt__(self, other):
        if not isinstance(other, Qid):
            return NotImplemented
        return self.comparison_key() > other.comparison_key()

    def __ge__(self, other):
        if not isinstance(other, Qid):
            return NotImplemented
        return self.comparison_key() >= other.comparison_key()

    def __hash__(self):
        return hash(self.comparison_key())

    def __str__(self):
        return self.comparison_key()


class QubitAsQid(Qid):
    """
    Wraps an arbitrary Qid and assigns it a different dimension.

    The comparison key combines the comparison key of the wrapped Qid with the
    target dimension, so the same quantum object at two dimensions yields two
    distinct Qids.

    Parameters
    ----------
    qubit : Qid
        The wrapped Qid.
    dimension : int
        The dimension of the adapter.

    Raises
    ------
    InvalidDimensionError
        The dimension is not a positive integer.

    Examples
    --------

    >>> from qidops import NamedQubit, QubitAsQid
    >>> qb = NamedQubit("alphonse")
    >>> qutrit = QubitAsQid(qb, 3)
    >>> qutrit.dimension
    3
    >>> qutrit == qb
    False
    >>> qutrit.with_dimension(4).qubit == qb
    True

    """

    __slots__ = ("_qubit", "_dimension")

    def __init__(self, qubit, dimension):
        if not isinstance(qubit, Qid):
            raise TypeError(f"Tried to wrap object of type {type(qubit)} (required is Qid)")

        self._qubit = qubit
        self._dimension = validate_dimension(dimension)

    @property
    def qubit(self):
        return self._qubit

    @property
    def dimension(self):
        return self._dimension

    def _comparison_key(self):
        return f"{self._qubit.comparison_key()} (d={self._dimension})"

    def with_dimension(self, dimension):
        dimension = validate_dimension(dimension)
        if dimension == self._dimension:
            return self.copy()
        # Wrap the original object instead of stacking adapters
        return QubitAsQid(self._qubit, dimension)

    def __repr__(self):
        return f"QubitAsQid({self._qubit!r}, dimension={self._dimension})"


def QubitAsQId(qubit, dimension):
    warnings.warn(
        "DeprecationWarning: QubitAsQId will no longer be supported in a later "
        "release. Instead please use QubitAsQid.",
        DeprecationWarning,
        stacklevel=2,
    )
    return QubitAsQid(qubit, dimension)


def as_qid_tuple(qubits):
    """
    Turns an iterable of Qids into a tuple, raising a ``TypeError`` for entries
    which are not Qids.
    """
    qubits = tuple(qubits)
    for qb in qubits:
        if not isinstance(qb, Qid):
            raise TypeError(f"Tried to use object of type {type(qb)} as a qubit (required is Qid)")
    return qubits
