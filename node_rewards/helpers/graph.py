"""The Graph GraphQL client utilities."""

from typing import Any

import httpx

from node_rewards.helpers.http import UpstreamError, post_json


class GraphClient:
    """Client for a single subgraph's GraphQL endpoint."""

    def __init__(self, subgraph_url: str, timeout: float | None = None) -> None:
        """Initialize Graph client.

        Args:
            subgraph_url: Full URL of the subgraph endpoint
            timeout: Optional timeout override for queries in seconds

        Raises:
            ValueError: If subgraph_url is empty or None
        """
        if not subgraph_url:
            msg = "Subgraph URL cannot be empty"
            raise ValueError(msg)

        self.subgraph_url = subgraph_url
        self.timeout = timeout

    async def query(
        self,
        client: httpx.AsyncClient,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Run a GraphQL query and return its ``data`` object.

        Args:
            client: HTTP client instance
            query: GraphQL query document
            variables: Optional query variables

        Returns:
            The ``data`` member of the response

        Raises:
            UpstreamError: If the request fails or the response carries
                GraphQL errors or no data
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        result = await post_json(
            client, self.subgraph_url, payload, timeout=self.timeout
        )
        if not isinstance(result, dict):
            raise UpstreamError(self.subgraph_url, "GraphQL response is not an object")

        if result.get("errors"):
            messages = "; ".join(
                str(error.get("message", error))
                if isinstance(error, dict)
                else str(error)
                for error in result["errors"]
            )
            raise UpstreamError(self.subgraph_url, f"GraphQL error: {messages}")

        data = result.get("data")
        if not isinstance(data, dict):
            raise UpstreamError(self.subgraph_url, "GraphQL response has no data")

        return data
