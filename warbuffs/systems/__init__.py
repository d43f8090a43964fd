"""Session systems: the battlefield registry and the consumption log."""

from .battlefield import Battlefield
from .consumption_log import ConsumptionLog, ConsumptionRecord, ConsumptionTrigger

__all__ = ["Battlefield", "ConsumptionLog", "ConsumptionRecord", "ConsumptionTrigger"]
