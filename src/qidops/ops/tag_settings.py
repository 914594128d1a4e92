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

from contextvars import ContextVar


class TagSettings:
    """
    Holds the switches that control how tags are combined.

    ``_additive`` determines the behavior of
    :meth:`Operation.with_tags <qidops.Operation.with_tags>` on operations which
    already carry tags. If False (the default), the new tags replace the existing
    ones. If True, the new tags are appended to the existing ones. The value is
    stored per context, so switching it in one thread doesn't affect others.
    """

    _additive = ContextVar("additive_tags", default=False)

    @staticmethod
    def is_additive():
        return TagSettings._additive.get()


class AdditiveTagging:
    """
    Context manager to make :meth:`Operation.with_tags <qidops.Operation.with_tags>`
    append tags instead of replacing them.

    The setting only applies to the current thread (or asyncio task) and is
    restored on exit.

    Examples
    --------

    >>> from qidops import NamedQubit, IdentityGate, additive_tags
    >>> op = IdentityGate(1).on(NamedQubit("a")).with_tags(["calibrated"])
    >>> op.with_tags(["slow"]).tags
    ('slow',)
    >>> with additive_tags():
    ...     print(op.with_tags(["slow"]).tags)
    ('calibrated', 'slow')

    """

    def __init__(self, additive=True):
        self.additive = additive
        self._tokens = []

    def __enter__(self):
        self._tokens.append(TagSettings._additive.set(self.additive))
        return self

    def __exit__(self, exception_type, exception_value, traceback):
        TagSettings._additive.reset(self._tokens.pop())


additive_tags = AdditiveTagging
