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
from abc import ABC, abstractmethod

from qidops.ops.errors import ArityMismatchError, DimensionMismatchError
from qidops.ops.qid import Qid, as_qid_tuple


def validate_qid_shape(gate, qubits):
    """
    Checks that a list of qubits matches the qid shape of a gate.

    This is the default implementation of :meth:`Gate.validate_args`. Gates with
    custom constraints can override ``validate_args`` and call this function as
    part of their checks.

    Parameters
    ----------
    gate : Gate
        The gate to be applied.
    qubits : list[Qid]
        The qubits the gate should be applied to.

    Raises
    ------
    ArityMismatchError
        The amount of qubits doesn't match the arity of the gate.
    DimensionMismatchError
        The dimension of the qubit at some position doesn't match the qid shape
        of the gate at that position. The first offending position is reported.

    """
    qubits = as_qid_tuple(qubits)
    qid_shape = gate.qid_shape()

    if len(qubits) != len(qid_shape):
        raise ArityMismatchError(gate, len(qid_shape), len(qubits))

    for i, (qb, dimension) in enumerate(zip(qubits, qid_shape)):
        if qb.dimension != dimension:
            raise DimensionMismatchError(gate, i, dimension, qb.dimension)


class Gate(ABC):
    """
    Describes an effect on a fixed amount of qubits. Gates don't carry
    information about which qubits they are applied to, a gate together with its
    qubits forms a :ref:`GateOperation`.

    Concrete gates only need to implement ``qid_shape``, which returns one
    dimension per qubit the gate acts on. The arity of the gate is the length of
    the qid shape.

    Examples
    --------

    We create a gate acting on a qubit and a qutrit and apply it.

    >>> from qidops import Gate, LineQid
    >>> class QubitQutritGate(Gate):
    ...     def qid_shape(self):
    ...         return (2, 3)
    ...     def __str__(self):
    ...         return "QQ"
    >>> q0, q1 = LineQid.for_qid_shape((2, 3))
    >>> print(QubitQutritGate().on(q0, q1))
    QQ(q(0) (d=2), q(1) (d=3))
    >>> QubitQutritGate().on(q1, q0)
    Traceback (most recent call last):
    ...
    qidops.ops.errors.DimensionMismatchError: Tried to apply gate QQ on a qubit of dimension 3 at position 0 (expected dimension 2)

    """

    @abstractmethod
    def qid_shape(self):
        """
        Returns a tuple containing the dimension of every qubit the gate acts on.
        """

    def num_qubits(self):
        return len(self.qid_shape())

    def validate_args(self, qubits):
        """
        Checks if the gate can be applied to the given qubits. Raises an
        :ref:`ApplicationError` if not.
        """
        validate_qid_shape(self, qubits)

    def on(self, *qubits):
        """
        Applies the gate to the given qubits.

        Parameters
        ----------
        *qubits : Qid
            The qubits to apply the gate to.

        Raises
        ------
        ApplicationError
            The qubits don't match the qid shape of the gate.

        Returns
        -------
        GateOperation
            The gate bound to the qubits.

        """
        from qidops.ops.gate_operation import GateOperation

        return GateOperation(self, qubits)

    def __call__(self, *qubits):
        return self.on(*qubits)

    def on_each(self, *targets):
        """
        Applies a single-qubit gate to each of the given qubits.

        Parameters
        ----------
        *targets : Qid or iterable of Qids
            The qubits to apply the gate to.

        Raises
        ------
        ValueError
            The gate doesn't act on exactly one qubit.

        Returns
        -------
        list[GateOperation]
            One operation per qubit.

        """
        if self.num_qubits() != 1:
            raise ValueError(
                f"Tried to call on_each for gate {self} acting on {self.num_qubits()} qubits"
            )

        qubits = []
        for target in targets:
            if isinstance(target, Qid):
                qubits.append(target)
            elif isinstance(target, (str, bytes)):
                raise TypeError(f"Tried to apply gate {self} on string {target!r}")
            else:
                qubits.extend(as_qid_tuple(target))

        return [self.on(qb) for qb in qubits]

    def inverse(self):
        """
        Returns the inverse of this gate.

        The inversion itself is deferred, the result is an
        :ref:`InverseCompositeGate` wrapping this gate.
        """
        from qidops.ops.inverse_composite_gate import InverseCompositeGate

        return InverseCompositeGate(self)

    def __pow__(self, exponent):
        if exponent == 1:
            return self
        if exponent == -1:
            return self.inverse()
        return NotImplemented

    def copy(self):
        return copy.copy(self)
