"""LAN address lookup used by `mealcart.main` to print a reachable URL."""
import logging
import socket
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

LOOPBACK = "127.0.0.1"
# Only used to pick a route; UDP connect() sends no packet
ROUTE_TARGET: Tuple[str, int] = ("10.255.255.255", 1)


def get_local_ip(target: Tuple[str, int] = ROUTE_TARGET) -> str:
    """Address of the interface the OS would route ``target`` through, LOOPBACK when offline."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as udp:
        try:
            udp.connect(target)
            address = udp.getsockname()[0]
        except OSError as e:
            logger.debug("No LAN route (%s), falling back to %s", e, LOOPBACK)
            return LOOPBACK
    return str(address) if address and address != "0.0.0.0" else LOOPBACK


def lan_url(port: int) -> Optional[str]:
    """URL other devices on the network can open, or None when only loopback is available."""
    ip = get_local_ip()
    if ip == LOOPBACK:
        return None
    return f"http://{ip}:{port}"
