"""
Membership e-mail schedulers.

Each scheduler is built once per run with its collaborators injected
(store, dispatcher, clock), runs to completion and returns a result object.

Usage:
    from memberships.services import PremiumOfferCampaign, ReminderScheduler

    ReminderScheduler().run().to_dict()
    PremiumOfferCampaign().run().to_dict()
"""

from memberships.services.premium_offers import (
    CampaignRunResult,
    PremiumOfferCampaign,
)
from memberships.services.reminders import (
    ONE_DAY_REMINDER,
    SEVEN_DAY_REMINDER,
    ReminderRule,
    ReminderRunResult,
    ReminderScheduler,
)

__all__ = [
    "CampaignRunResult",
    "ONE_DAY_REMINDER",
    "PremiumOfferCampaign",
    "ReminderRule",
    "ReminderRunResult",
    "ReminderScheduler",
    "SEVEN_DAY_REMINDER",
]
