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


def as_integer(value):
    """
    Normalizes integral values (Python or numpy integers, integral numpy arrays
    of size one) to a plain Python ``int``.

    Parameters
    ----------
    value : object
        The value to normalize.

    Raises
    ------
    TypeError
        The value is not integral.

    Returns
    -------
    int
        The normalized value.

    Examples
    --------

    >>> import numpy as np
    >>> from qidops import as_integer
    >>> as_integer(np.int64(3))
    3

    """

    # bool is an int subclass but never a meaningful dimension/index
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected an integer but got {value!r}")

    if isinstance(value, np.ndarray) and value.size == 1:
        value = value.reshape(-1)[0]

    if isinstance(value, np.integer):
        return value.item()

    if isinstance(value, int):
        return value

    raise TypeError(f"Expected an integer but got {value!r} of type {type(value)}")
