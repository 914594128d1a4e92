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

# This file uses the Gate interface from gate.py to define some generic gates

import numpy as np
from sympy import lambdify
from sympy.core.expr import Expr

from qidops.ops.gate import Gate
from qidops.ops.qid import validate_dimension


def _validate_qid_shape(qid_shape):
    return tuple(validate_dimension(dimension) for dimension in qid_shape)


class IdentityGate(Gate):
    """
    A gate which leaves the state of the qubits it acts on unchanged.

    Parameters
    ----------
    num_qubits : int, optional
        The amount of qubits. Qubits are assumed to be two-level systems.
    qid_shape : tuple[int], optional
        The dimensions of the qids the gate acts on. Has to be given if
        ``num_qubits`` is not.

    Raises
    ------
    ValueError
        Neither ``num_qubits`` nor ``qid_shape`` is given, or they don't agree.

    Examples
    --------

    >>> from qidops import IdentityGate, LineQid
    >>> IdentityGate(qid_shape=(3, 3)).on(*LineQid.range(2, dimension=3))
    IdentityGate(qid_shape=(3, 3)).on(LineQid(0, dimension=3), LineQid(1, dimension=3))

    """

    def __init__(self, num_qubits=None, qid_shape=None):
        if qid_shape is None:
            if num_qubits is None:
                raise ValueError("Specify either num_qubits or qid_shape for IdentityGate")
            qid_shape = (2,) * num_qubits
        qid_shape = _validate_qid_shape(qid_shape)

        if num_qubits is not None and num_qubits != len(qid_shape):
            raise ValueError(
                f"Specified qid_shape {qid_shape} incompatible with num_qubits {num_qubits}"
            )

        self._qid_shape = qid_shape

    def qid_shape(self):
        return self._qid_shape

    def inverse(self):
        return self

    def __eq__(self, other):
        if not isinstance(other, IdentityGate):
            return NotImplemented
        return self._qid_shape == other._qid_shape

    def __hash__(self):
        return hash((IdentityGate, self._qid_shape))

    def __str__(self):
        return "I"

    def __repr__(self):
        if all(dimension == 2 for dimension in self._qid_shape):
            return f"IdentityGate({len(self._qid_shape)})"
        return f"IdentityGate(qid_shape={self._qid_shape})"


class NamedGate(Gate):
    """
    A gate identified by a name and a list of parameters, for instance ``rx`` with
    the rotation angle as parameter. The effect of the gate is defined by whoever
    processes it (a simulator, a transpiler, a backend).

    Parameters can be numbers or sympy expressions. Expressions containing free
    symbols are treated as abstract parameters, which can be bound later using
    ``bind_parameters``.

    Parameters
    ----------
    name : str
        The name of the gate.
    qid_shape : tuple[int], optional
        The dimensions of the qids the gate acts on. The default is (2,).
    params : list, optional
        The parameters of the gate. The default is [].

    Raises
    ------
    TypeError
        The name is not a string or a parameter is not a number or sympy expression.

    Examples
    --------

    We create a parametrized rotation and bind its parameter.

    >>> from sympy import Symbol
    >>> from qidops import NamedGate
    >>> phi = Symbol("phi")
    >>> abstract_gate = NamedGate("rz", params=[2 * phi])
    >>> abstract_gate.is_parametrized()
    True
    >>> abstract_gate.bind_parameters({phi: 0.25}).params
    (0.5,)

    """

    def __init__(self, name, qid_shape=(2,), params=()):
        if not isinstance(name, str):
            raise TypeError(
                f"Tried to create a NamedGate with name of type {type(name)} (required is str)"
            )

        self._name = name
        self._qid_shape = _validate_qid_shape(qid_shape)

        new_params = []
        abstract_params = set()

        # Collect abstract parameters (ie. sympy expressions with free symbols)
        for par in params:
            if isinstance(par, np.number):
                par = par.item()
            elif isinstance(par, Expr):
                if len(par.free_symbols):
                    abstract_params = abstract_params.union(par.free_symbols)
                elif par.is_real:
                    par = float(par)
                else:
                    par = complex(par)
            elif not isinstance(par, (float, int, complex)):
                raise TypeError(
                    f"Tried to create gate with parameters of type {type(par)}"
                )

            new_params.append(par)

        self._params = tuple(new_params)
        self._abstract_params = frozenset(abstract_params)

    @property
    def name(self):
        return self._name

    @property
    def params(self):
        return self._params

    @property
    def abstract_params(self):
        return self._abstract_params

    def qid_shape(self):
        return self._qid_shape

    def is_parametrized(self):
        return bool(self._abstract_params)

    def bind_parameters(self, subs_dic):
        """
        Binds abstract parameters to specified values.

        Symbols which are not contained in ``subs_dic`` stay abstract.

        Parameters
        ----------
        subs_dic : dict
            A dictionary containing the parameters as keys.

        Returns
        -------
        NamedGate
            The gate with bound parameters.

        """
        new_params = []
        for par in self._params:
            if isinstance(par, Expr):
                args = sorted(par.free_symbols, key=str)
                if all(symb in subs_dic for symb in args):
                    par = lambdify(args, par, modules="numpy")(
                        *[subs_dic[symb] for symb in args]
                    )
                else:
                    par = par.subs({symb: subs_dic[symb] for symb in args if symb in subs_dic})
            new_params.append(par)

        return NamedGate(self._name, self._qid_shape, new_params)

    def __eq__(self, other):
        if not isinstance(other, NamedGate):
            return NotImplemented
        return (
            self._name == other._name
            and self._qid_shape == other._qid_shape
            and self._params == other._params
        )

    def __hash__(self):
        return hash((self._name, self._qid_shape, self._params))

    def __str__(self):
        if not self._params:
            return self._name
        return self._name + "(" + ", ".join(str(par) for par in self._params) + ")"

    def __repr__(self):
        res = f"NamedGate({self._name!r}"
        if self._qid_shape != (2,):
            res += f", qid_shape={self._qid_shape}"
        if self._params:
            res += f", params={list(self._params)!r}"
        return res + ")"
