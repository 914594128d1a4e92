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

__all__ = [
    "InvalidDimensionError",
    "ApplicationError",
    "ArityMismatchError",
    "DimensionMismatchError",
]


class InvalidDimensionError(ValueError):
    """
    Raised when a Qid is constructed (or a dimension is validated) with a
    dimension that is not a positive integer.
    """

    def __init__(self, dimension):
        self.dimension = dimension
        super().__init__(
            f"Wrong qid dimension. Expected a positive integer but got {dimension!r}."
        )


class ApplicationError(ValueError):
    """
    Raised when a gate is applied to qubits which don't match its qid shape.
    """


class ArityMismatchError(ApplicationError):

    def __init__(self, gate, expected, actual):
        self.gate = gate
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tried to apply gate {gate} on {actual} qubits "
            f"(gate operates on {expected} qubits)"
        )


class DimensionMismatchError(ApplicationError):

    def __init__(self, gate, index, expected, actual):
        self.gate = gate
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tried to apply gate {gate} on a qubit of dimension {actual} at "
            f"position {index} (expected dimension {expected})"
        )
