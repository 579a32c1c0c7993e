"""Static station and fare reference data for the supported rail networks."""

from typing import Optional

from faretrack.networks.base import FareMatrix, Network, Station, StationTable
from faretrack.networks import (
    ankeng_lrt,
    danhai_lrt,
    new_taipei_metro,
    taipei_metro,
    taoyuan_metro,
    tra,
)

NETWORKS: dict[str, Network] = {
    network.key: network
    for network in (
        taipei_metro.NETWORK,
        new_taipei_metro.NETWORK,
        taoyuan_metro.NETWORK,
        danhai_lrt.NETWORK,
        ankeng_lrt.NETWORK,
        tra.NETWORK,
    )
}


def get_network(key: str) -> Optional[Network]:
    """Get a network by key (e.g. 'taipei_metro'), or None if unsupported."""
    return NETWORKS.get(key)


def list_networks() -> list[Network]:
    """List all supported networks."""
    return list(NETWORKS.values())


def search_stations(query: str) -> list[tuple[Network, Station]]:
    """Search stations across every network."""
    results = []
    for network in NETWORKS.values():
        for station in network.stations.search(query):
            results.append((network, station))
    return results


__all__ = [
    "FareMatrix",
    "Network",
    "Station",
    "StationTable",
    "NETWORKS",
    "get_network",
    "list_networks",
    "search_stations",
]
