"""Builder for the risk parameters of a simulated account."""

from __future__ import annotations

from typing import Any


class RiskBuilder:
    """Risk parameters for one simulated account.

    Every setter returns a new builder, so calls can be chained.
    """

    def __init__(self, account_id: str) -> None:
        self.account_id = str(account_id)
        self._fields: dict[str, Any] = {}

    def _with(self, key: str, value: Any) -> RiskBuilder:
        copy = RiskBuilder(self.account_id)
        copy._fields = {**self._fields, key: value}
        return copy

    def liquidation_account_value(self, value: float) -> RiskBuilder:
        """Account value at which liquidation starts."""
        return self._with("LiquidationAccountValue", value)

    def liquidation_loss_from_start_of_day(self, value: float) -> RiskBuilder:
        """Loss since the start of the day that triggers liquidation."""
        return self._with("LiquidationLossFromStartOfDay", value)

    def liquidation_loss_from_high_of_day(self, value: float) -> RiskBuilder:
        """Loss from the day's high that triggers liquidation."""
        return self._with("LiquidationLossFromHighOfDay", value)

    def liquidation_loss_from_high_of_multiday(self, value: float) -> RiskBuilder:
        """Loss from the multi-day high that triggers liquidation."""
        return self._with("LiquidationLossFromHighOfMultiday", value)

    def liquidation_pct_loss_from_start_of_day(self, value: float) -> RiskBuilder:
        """Percentage loss since the start of the day that triggers liquidation."""
        return self._with("LiquidationPctLossFromStartOfDay", value)

    def liquidation_pct_loss_from_high_of_day(self, value: float) -> RiskBuilder:
        """Percentage loss from the day's high that triggers liquidation."""
        return self._with("LiquidationPctLossFromHighOfDay", value)

    def liquidation_pct_loss_from_high_of_multiday(self, value: float) -> RiskBuilder:
        """Percentage loss from the multi-day high that triggers liquidation."""
        return self._with("LiquidationPctLossFromHighOfMultiday", value)

    def liquidation_pct_margin_deficiency(self, value: float) -> RiskBuilder:
        """Percentage margin deficiency that triggers liquidation."""
        return self._with("LiquidationPctMarginDeficiency", value)

    def liquidation_max_value_override(self, value: float) -> RiskBuilder:
        """Override of the maximum account value limit."""
        return self._with("LiquidationMaxValueOverride", value)

    def reduce_positions_only(self, reduce: bool) -> RiskBuilder:
        """Only reduce positions instead of flattening them."""
        return self._with("ReducePositionsOnly", bool(reduce))

    def restore_trading(self, restore: bool) -> RiskBuilder:
        """Restore trading after liquidation."""
        return self._with("RestoreTrading", bool(restore))

    def margin_schedule_name(self, name: str) -> RiskBuilder:
        """Name of the margin schedule."""
        return self._with("MarginScheduleName", str(name))

    def template_id(self, template_id: str) -> RiskBuilder:
        """Risk template identifier."""
        return self._with("TemplateId", str(template_id))

    def to_request(self) -> dict[str, Any]:
        """The JSON body of the request; unset parameters are omitted."""
        return {"AccountId": self.account_id, **self._fields}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RiskBuilder):
            return NotImplemented
        return self.account_id == other.account_id and self._fields == other._fields

    def __repr__(self) -> str:
        return f"RiskBuilder(account_id={self.account_id!r}, {self._fields!r})"