"""Reports resource."""

from proxy_manager_sdk.resources._base import DispatchResult, Resource


class Reports(Resource):
    path = "reports"

    async def get_host_stats(self) -> DispatchResult:
        """Fetch host counts per host type."""
        return await self._dispatcher.dispatch("GET", f"{self.path}/hosts")
