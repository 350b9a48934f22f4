# FILE: bytering/buffer/policy.py
# ------------------------------------------------------------------------------
from enum import Enum

from bytering.errors.fatal import ConfigurationError


class OverflowPolicy(str, Enum):
    OVERWRITE_ON_FULL = "overwrite_on_full"
    REJECT_ON_FULL = "reject_on_full"

    @classmethod
    def parse(cls, raw) -> "OverflowPolicy":
        """Accept an OverflowPolicy, its value, or a short alias ("overwrite", "reject")."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            normalized = raw.strip().lower()
            for policy in cls:
                if normalized in (policy.value, policy.value.split("_")[0]):
                    return policy
        raise ConfigurationError("Unknown overflow policy", context={"value": raw})
