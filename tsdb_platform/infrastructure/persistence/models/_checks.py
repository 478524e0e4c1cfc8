"""Helpers for CHECK constraints over enum-valued string columns."""

from sqlalchemy import CheckConstraint


def status_check(column: str, values: list[str], name: str) -> CheckConstraint:
    """CHECK (<column> IN (...)) with each value single-quote escaped."""
    quoted = ", ".join("'{}'".format(v.replace("'", "''")) for v in values)
    return CheckConstraint(f"{column} IN ({quoted})", name=name)
