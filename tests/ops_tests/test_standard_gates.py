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
import numpy as np
import pytest
from sympy import Symbol, pi

from qidops import IdentityGate, InvalidDimensionError, LineQid, NamedGate


def test_identity_gate_shapes():
    assert IdentityGate(3).qid_shape() == (2, 2, 2)
    assert IdentityGate(qid_shape=(3, 4)).qid_shape() == (3, 4)
    assert IdentityGate(2, qid_shape=(3, 4)).num_qubits() == 2
    assert IdentityGate(qid_shape=[np.int64(3)]).qid_shape() == (3,)

    with pytest.raises(ValueError):
        IdentityGate()
    with pytest.raises(ValueError, match="incompatible"):
        IdentityGate(1, qid_shape=(3, 4))
    with pytest.raises(InvalidDimensionError):
        IdentityGate(qid_shape=(2, 0))


def test_identity_gate_value_semantics():
    assert IdentityGate(2) == IdentityGate(qid_shape=(2, 2))
    assert hash(IdentityGate(2)) == hash(IdentityGate(qid_shape=(2, 2)))
    assert IdentityGate(2) != IdentityGate(qid_shape=(2, 3))
    assert IdentityGate(2).inverse() == IdentityGate(2)
    assert repr(IdentityGate(2)) == "IdentityGate(2)"
    assert repr(IdentityGate(qid_shape=(3,))) == "IdentityGate(qid_shape=(3,))"


def test_named_gate_parameters():
    gate = NamedGate("u3", params=[np.float64(0.5), 1, 2j, pi / 2])

    assert gate.params == (0.5, 1, 2j, float(pi / 2))
    assert type(gate.params[0]) is float
    assert not gate.is_parametrized()
    assert gate.abstract_params == frozenset()

    with pytest.raises(TypeError):
        NamedGate("rx", params=["0.5"])
    with pytest.raises(TypeError):
        NamedGate(1)


def test_named_gate_abstract_parameters():
    phi = Symbol("phi")
    theta = Symbol("theta")
    gate = NamedGate("u", params=[phi + theta, 2 * phi, 0.1])

    assert gate.is_parametrized()
    assert gate.abstract_params == {phi, theta}

    bound = gate.bind_parameters({phi: 0.25, theta: 1})
    assert bound.params == pytest.approx((1.25, 0.5, 0.1))
    assert not bound.is_parametrized()
    assert gate.is_parametrized()


def test_named_gate_partial_binding():
    phi = Symbol("phi")
    theta = Symbol("theta")
    gate = NamedGate("u", params=[phi + theta, 2 * phi])

    partially_bound = gate.bind_parameters({phi: 1})
    assert partially_bound.abstract_params == {theta}
    assert partially_bound.params[1] == 2
    assert partially_bound.bind_parameters({theta: 2}).params == pytest.approx((3, 2))


def test_named_gate_value_semantics():
    assert NamedGate("rx", params=[0.5]) == NamedGate("rx", params=[0.5])
    assert NamedGate("rx", params=[0.5]) != NamedGate("rx", params=[0.6])
    assert NamedGate("rx", params=[0.5]) != NamedGate("ry", params=[0.5])
    assert NamedGate("x") != NamedGate("x", (3,))
    assert len({NamedGate("x"), NamedGate("x"), NamedGate("y")}) == 2


def test_named_gate_on_qudits():
    q0, q1 = LineQid.for_qid_shape((2, 3))
    op = NamedGate("cshift", qid_shape=(2, 3)).on(q0, q1)

    assert op.qid_shape() == (2, 3)
    assert str(op) == "cshift(q(0) (d=2), q(1) (d=3))"
    assert str(op.gate.inverse()) == "cshift†"
