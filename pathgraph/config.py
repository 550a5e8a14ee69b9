"""Configuration classes for pathgraph components."""

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Settings shared by graph construction and result reporting."""

    # Digits after the decimal point when rendering arc costs
    cost_precision: int = 6

    # Refuse negative arc costs at construction time
    reject_negative_costs: bool = True

    # Cost assigned to imported edges that carry no cost attribute
    default_cost: float = 1.0

    def format_cost(self, value: float) -> str:
        """Return ``value`` with at most ``cost_precision`` decimals.

        Trailing zeros and a dangling decimal point are trimmed, so 10.0 renders
        as "10" and 0.25 as "0.25".
        """
        s = f"{float(value):.{self.cost_precision}f}"
        if "." in s:
            s = s.rstrip("0").rstrip(".")
        if s == "-0":
            s = "0"
        return s


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
