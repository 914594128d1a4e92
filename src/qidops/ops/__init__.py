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

from qidops.ops.errors import *
from qidops.ops.tag_settings import *
from qidops.ops.qid import *
from qidops.ops.named_qubit import *
from qidops.ops.line_qubit import *
from qidops.ops.gate import *
from qidops.ops.inverse_composite_gate import *
from qidops.ops.operation import *
from qidops.ops.gate_operation import *
from qidops.ops.standard_gates import *
