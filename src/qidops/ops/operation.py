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

from qidops.misc.hashable import validate_tag
from qidops.ops.tag_settings import TagSettings


class Operation(ABC):
    """
    Describes an effect on a specific, ordered list of qubits, for instance a
    :ref:`Gate` applied to some qubits.

    Operations are immutable. Methods like ``with_qubits`` or ``with_tags`` return
    new Operation objects instead of modifying the existing one.

    Operations can be annotated with tags, ie. arbitrary hashable objects which
    carry information for later processing steps but don't change the effect of
    the operation. Tagging an operation wraps it into a :ref:`TaggedOperation`,
    the original operation can be recovered via ``untagged``.

    Examples
    --------

    >>> from qidops import NamedGate, LineQubit
    >>> q0, q1 = LineQubit.range(2)
    >>> op = NamedGate("cz", (2, 2)).on(q0, q1)
    >>> tagged_op = op.with_tags(["virtual"])
    >>> tagged_op.tags
    ('virtual',)
    >>> tagged_op.untagged == op
    True
    >>> tagged_op.with_qubits([q1, q0]).qubits
    (LineQubit(1), LineQubit(0))

    """

    __slots__ = ()

    @property
    @abstractmethod
    def qubits(self):
        """
        The tuple of qubits the operation acts on.
        """

    @property
    def gate(self):
        """
        The gate this operation applies, or None for operations which are not
        based on a gate.
        """
        return None

    @abstractmethod
    def with_qubits(self, new_qubits):
        """
        Returns an equivalent operation acting on different qubits.

        Implementations have to make sure ``new_qubits`` matches the qubit
        structure of the operation, for instance by calling the ``validate_args``
        method of the underlying gate.

        Parameters
        ----------
        new_qubits : list[Qid]
            The qubits replacing ``self.qubits`` position by position.

        Returns
        -------
        Operation
            The operation acting on ``new_qubits``.

        """

    def qid_shape(self):
        return tuple(qb.dimension for qb in self.qubits)

    def num_qubits(self):
        return len(self.qubits)

    def transform_qubits(self, qubit_map):
        """
        Returns the operation with every qubit replaced by ``qubit_map(qubit)``.
        ``qubit_map`` can be a callable or a dictionary. Qubits which are not
        contained in a dictionary are kept.
        """
        if isinstance(qubit_map, dict):
            return self.with_qubits([qubit_map.get(qb, qb) for qb in self.qubits])
        return self.with_qubits([qubit_map(qb) for qb in self.qubits])

    @property
    def tags(self):
        """
        The tuple of tags attached to this operation.
        """
        return ()

    @property
    def untagged(self):
        """
        The operation without any tags.
        """
        return self

    def with_tags(self, new_tags):
        """
        Returns the operation carrying the given tags.

        The new tags replace the tags the operation is already carrying. This
        behavior can be changed with the :ref:`additive_tags` context manager.

        Parameters
        ----------
        new_tags : iterable
            The tags. Every tag has to be hashable and equal to itself.

        Raises
        ------
        TypeError
            One of the tags is not hashable.

        Returns
        -------
        Operation
            A TaggedOperation wrapping the untagged operation. If there are no
            tags, the untagged operation is returned.

        """
        new_tags = tuple(new_tags)
        for tag in new_tags:
            validate_tag(tag)

        if TagSettings.is_additive():
            new_tags = tuple(self.tags) + new_tags

        if not new_tags:
            return self.untagged

        return TaggedOperation(self.untagged, new_tags)

    def copy(self):
        return copy.copy(self)


class TaggedOperation(Operation):
    """
    Decorates an operation with a tuple of tags.

    The tags are kept in the order they were given, duplicates are not removed.
    Qubits, gate and qid shape are those of the wrapped operation.

    Parameters
    ----------
    sub_operation : Operation
        The operation to tag.
    tags : iterable
        The tags. Every tag has to be hashable and equal to itself.

    Examples
    --------

    >>> from qidops import IdentityGate, NamedQubit, TaggedOperation
    >>> op = IdentityGate(1).on(NamedQubit("a"))
    >>> tagged_op = TaggedOperation(op, ["calibrated", 3])
    >>> print(tagged_op)
    I(a)['calibrated', 3]
    >>> tagged_op.with_qubits([NamedQubit("b")]).tags
    ('calibrated', 3)

    """

    __slots__ = ("_sub_operation", "_tags")

    def __init__(self, sub_operation, tags):
        if not isinstance(sub_operation, Operation):
            raise TypeError(
                f"Tried to tag object of type {type(sub_operation)} (required is Operation)"
            )

        tags = tuple(tags)
        for tag in tags:
            validate_tag(tag)

        self._sub_operation = sub_operation
        self._tags = tags

    @property
    def sub_operation(self):
        return self._sub_operation

    @property
    def qubits(self):
        return self._sub_operation.qubits

    @property
    def gate(self):
        return self._sub_operation.gate

    def qid_shape(self):
        return self._sub_operation.qid_shape()

    def with_qubits(self, new_qubits):
        return TaggedOperation(self._sub_operation.with_qubits(new_qubits), self._tags)

    def with_gate(self, new_gate):
        """
        Returns the operation with the gate of the wrapped operation replaced,
        keeping the tags.
        """
        if not hasattr(self._sub_operation, "with_gate"):
            raise TypeError(
                f"Tried to replace the gate of {self._sub_operation!r} which has no gate"
            )
        return TaggedOperation(self._sub_operation.with_gate(new_gate), self._tags)

    @property
    def tags(self):
        return self._tags

    @property
    def untagged(self):
        return self._sub_operation

    def __eq__(self, other):
        if not isinstance(other, TaggedOperation):
            return NotImplemented
        return (
            self._sub_operation == other._sub_operation and self._tags == other._tags
        )

    def __hash__(self):
        return hash((self._sub_operation, self._tags))

    def __str__(self):
        return str(self._sub_operation) + "[" + ", ".join(repr(tag) for tag in self._tags) + "]"

    def __repr__(self):
        return f"TaggedOperation({self._sub_operation!r}, {self._tags!r})"
