"""Identifier helpers shared by the rules."""

from __future__ import annotations


SETTER_PREFIX = "set"


def capitalize(name: str) -> str:
    """Upper-case the first character only: ``url`` -> ``Url``."""
    if not name or not name[0].islower():
        return name
    return name[0].title() + name[1:]


def decapitalize(name: str) -> str:
    """Lower-case the first character only: ``URL`` -> ``uRL``."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def fluent_method_name(prefix: str, property_name: str) -> str:
    """Plain concatenation, no separator: ``with`` + ``x`` -> ``withX``."""
    return prefix + capitalize(property_name)


def setter_field_name(setter_name: str) -> str:
    """
    Presumed backing field of a setter: strip ``set``, decapitalize.

    ``setFoo`` -> ``foo``, ``setURL`` -> ``uRL``. The result is not checked
    against the class's real fields.
    """
    if setter_name.startswith(SETTER_PREFIX):
        setter_name = setter_name[len(SETTER_PREFIX):]
    return decapitalize(setter_name)
