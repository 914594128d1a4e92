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

# Tags are opaque to this package. Consumers deduplicate and index them, which
# requires hash and equality to agree.


def is_valid_tag(tag):
    """
    Checks whether an object can be attached to an Operation as a tag.

    A valid tag has to be hashable and has to compare equal to itself.

    Parameters
    ----------
    tag : object
        The object to check.

    Returns
    -------
    bool
        True if the object can serve as a tag.

    Examples
    --------

    >>> from qidops import is_valid_tag
    >>> is_valid_tag("calibrated")
    True
    >>> is_valid_tag(["calibrated"])
    False
    >>> is_valid_tag(float("nan"))
    False

    """
    try:
        hash(tag)
    except TypeError:
        return False

    try:
        return bool(tag == tag)
    except (TypeError, ValueError):
        return False


def validate_tag(tag):
    """
    Raises a ``TypeError`` if the given object can not be used as a tag.
    """
    if not is_valid_tag(tag):
        raise TypeError(
            f"Tried to tag an operation with {tag!r} of type {type(tag)} "
            "(tags need to be hashable and equal to themselves)"
        )
