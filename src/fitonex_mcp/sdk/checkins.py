"""
FitONEX check-in SDK functions.
"""

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.models import CheckinStats, CheckinToday


def checkin_today(client: FitonexClient) -> CheckinToday:
    """
    Record today's check-in. Idempotent per day on the server side.

    POST v1/checkins/today

    Returns:
        CheckinToday {checkin, inserted}; inserted is False when the user
        had already checked in today
    """
    return CheckinToday.from_dict(client.make_request("POST", "v1/checkins/today"))


def get_checkin_stats(client: FitonexClient) -> CheckinStats:
    """
    GET v1/checkins/me

    Returns:
        CheckinStats {current_streak_days, longest_streak_days, last_checkin_day}
    """
    return CheckinStats.from_dict(client.make_request("GET", "v1/checkins/me"))
