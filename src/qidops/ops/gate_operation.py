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
from qidops.ops.operation import Operation
from qidops.ops.qid import as_qid_tuple


class GateOperation(Operation):
    """
    This class combines a :ref:`Gate` with the qubits it is applied to.

    The qubits are validated against the gate upon construction, so every
    GateOperation respects the arity and qid shape of its gate. GateOperations
    are usually created via :meth:`Gate.on <qidops.Gate.on>`.

    Parameters
    ----------
    gate : Gate
        The gate.
    qubits : list[Qid]
        The qubits the gate is applied to.

    Raises
    ------
    ApplicationError
        The qubits don't match the qid shape of the gate.

    Examples
    --------

    We create a GateOperation and exchange its gate.

    >>> from qidops import GateOperation, NamedGate, NamedQubit
    >>> qb = NamedQubit("alphonse")
    >>> op = GateOperation(NamedGate("x"), [qb])
    >>> print(op)
    x(alphonse)
    >>> print(op.with_gate(NamedGate("rx", params=[0.5])))
    rx(0.5)(alphonse)
    >>> op.with_gate(NamedGate("cx", (2, 2)))
    Traceback (most recent call last):
    ...
    qidops.ops.errors.ArityMismatchError: Tried to apply gate cx on 1 qubits (gate operates on 2 qubits)

    """

    __slots__ = ("_gate", "_qubits")

    def __init__(self, gate, qubits):
        if not isinstance(gate, Gate):
            raise TypeError(
                f"Tried to create a GateOperation with gate of type {type(gate)} (required is Gate)"
            )

        qubits = as_qid_tuple(qubits)
        gate.validate_args(qubits)

        self._gate = gate
        self._qubits = qubits

    @property
    def gate(self):
        return self._gate

    @property
    def qubits(self):
        return self._qubits

    def qid_shape(self):
        return self._gate.qid_shape()

    def with_qubits(self, new_qubits):
        return GateOperation(self._gate, new_qubits)

    def with_gate(self, new_gate):
        """
        Returns the operation with the gate replaced, acting on the same qubits.

        Parameters
        ----------
        new_gate : Gate
            The new gate.

        Raises
        ------
        ApplicationError
            The qubits don't match the qid shape of the new gate.

        Returns
        -------
        GateOperation
            The operation applying ``new_gate``.

        """
        if new_gate is self._gate:
            return self
        return GateOperation(new_gate, self._qubits)

    def __eq__(self, other):
        if not isinstance(other, GateOperation):
            return NotImplemented
        return self._qubits == other._qubits and self._gate == other._gate

    def __hash__(self):
        return hash((self._gate, self._qubits))

    def __str__(self):
        return str(self._gate) + "(" + ", ".join(str(qb) for qb in self._qubits) + ")"

    def __repr__(self):
        return repr(self._gate) + ".on(" + ", ".join(repr(qb) for qb in self._qubits) + ")"
