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

from qidops.ops.gate import Gate


class InverseCompositeGate(Gate):
    """
    The inverse of a gate, obtained from :meth:`Gate.inverse`.

    Only the qid shape (and the validation of arguments) is derived from the
    original gate. Computing the actual inverse is left to decomposition
    routines which inspect the ``original`` attribute.

    Parameters
    ----------
    original : Gate
        The gate to invert.

    Examples
    --------

    >>> from qidops import NamedGate
    >>> sqrt_x = NamedGate("sx")
    >>> sqrt_x_dg = sqrt_x.inverse()
    >>> print(sqrt_x_dg)
    sx†
    >>> sqrt_x_dg.qid_shape()
    (2,)
    >>> sqrt_x_dg.inverse() == sqrt_x
    True

    """

    def __init__(self, original):
        if not isinstance(original, Gate):
            raise TypeError(f"Tried to invert object of type {type(original)} (required is Gate)")
        self._original = original

    @property
    def original(self):
        return self._original

    def qid_shape(self):
        return self._original.qid_shape()

    def validate_args(self, qubits):
        self._original.validate_args(qubits)

    def inverse(self):
        return self._original

    def __eq__(self, other):
        if not isinstance(other, InverseCompositeGate):
            return NotImplemented
        return self._original == other._original

    def __hash__(self):
        return hash((InverseCompositeGate, self._original))

    def __str__(self):
        return f"{self._original}†"

    def __repr__(self):
        return f"({self._original!r}**-1)"
