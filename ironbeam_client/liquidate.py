"""Builder for liquidating simulated accounts."""

from __future__ import annotations

from typing import Any, Iterable


def _names(values: Iterable[str], what: str) -> list[str]:
    if isinstance(values, (str, bytes)):
        raise TypeError(f"{what} must be a collection of strings, not a single string")
    return [str(value) for value in values]


class LiquidateBuilder:
    """A liquidation request for simulated accounts.

    Every setter returns a new builder, so calls can be chained and a
    builder can be reused as a template.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def _with(self, key: str, value: Any) -> LiquidateBuilder:
        copy = LiquidateBuilder()
        copy._fields = {**self._fields, key: value}
        return copy

    def accounts(self, accounts: Iterable[str]) -> LiquidateBuilder:
        """Accounts to liquidate."""
        return self._with("Accounts", _names(accounts, "accounts"))

    def groups(self, groups: Iterable[str]) -> LiquidateBuilder:
        """Groups to liquidate."""
        return self._with("Groups", _names(groups, "groups"))

    def except_accounts(self, accounts: Iterable[str]) -> LiquidateBuilder:
        """Accounts to leave out of the liquidation."""
        return self._with("ExceptAccounts", _names(accounts, "accounts"))

    def force_manual(self, force: bool) -> LiquidateBuilder:
        """Force manual liquidation."""
        return self._with("ForceManualLiquidation", bool(force))

    def manual_for_illiquid(self, manual: bool) -> LiquidateBuilder:
        """Use manual liquidation for illiquid markets."""
        return self._with("UseManualLiquidationForIlliquidMarkets", bool(manual))

    def send_account_email(self, send: bool) -> LiquidateBuilder:
        """Send an e-mail to the account holder."""
        return self._with("SendAccountEmail", bool(send))

    def send_office_email(self, send: bool) -> LiquidateBuilder:
        """Send an e-mail to the office."""
        return self._with("SendOfficeEmail", bool(send))

    def to_request(self) -> dict[str, Any]:
        """The JSON body of the request; unset options are omitted."""
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in self._fields.items()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiquidateBuilder):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"LiquidateBuilder({self._fields!r})"