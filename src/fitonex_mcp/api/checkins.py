"""
Check-in Resource Client: daily check-ins and streaks.
"""

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import checkins as sdk_checkins
from fitonex_mcp.sdk.models import CheckinStats, CheckinToday
from fitonex_mcp.sdk.result import Outcome


class CheckinClient(ResourceClient):

    def checkin_today(self) -> Outcome[CheckinToday]:
        return self._run("Check in", sdk_checkins.checkin_today)

    def get_checkin_stats(self) -> Outcome[CheckinStats]:
        return self._run("Fetch check-in stats", sdk_checkins.get_checkin_stats)
