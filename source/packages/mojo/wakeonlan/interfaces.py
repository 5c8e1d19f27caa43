"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for looking up network adapters and selecting
               the source address for broadcasting a magic packet.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

import ipaddress
import logging
import socket

import netifaces

from mojo.wakeonlan.constants import IPV4_LOOPBACK_NETWORK, WAKE_ON_LAN_UDP_PORT
from mojo.wakeonlan.exceptions import (
    NetworkAdapterAddressesFetchingError,
    NetworkAdapterFetchingError,
    NetworkAdaptersFetchingError,
    NoUsableNetworkAdapterAddressError
)

if TYPE_CHECKING:
    from mojo.wakeonlan.configuration import WakeOnLanConfig

logger = logging.getLogger()

IPV4_LOOPBACK = ipaddress.ip_network(IPV4_LOOPBACK_NETWORK)


class NetworkAdapter:
    """
        A read-only description of a network adapter as reported by the operating system.
    """

    def __init__(self, *, name: str, index: int, addresses: Sequence[Tuple[int, str]]):
        self._name = name
        self._index = index
        self._addresses = tuple(addresses)
        return

    @property
    def addresses(self) -> Tuple[Tuple[int, str], ...]:
        """
            The (address family, address) pairs bound to the adapter in the order the
            operating system reported them.
        """
        return self._addresses

    @property
    def index(self) -> int:
        return self._index

    @property
    def name(self) -> str:
        return self._name

    @property
    def source_address(self) -> Optional[str]:
        """
            The address the adapter would be bound with when sending a magic packet.
        """
        return select_source_address(self._addresses)

    def __repr__(self) -> str:
        return "NetworkAdapter(name={!r}, index={}, addresses={!r})".format(self._name, self._index, self._addresses)


def get_adapter_index(ifname: str) -> int:
    """
        Gets the operating system index for the interface name or 0 if the platform does not
        provide interface indexes.
    """
    ifindex = 0

    try:
        ifindex = socket.if_nametoindex(ifname)
    except (AttributeError, OSError):
        pass

    return ifindex


def get_adapter_addresses(ifname: str, ifindex: int = 0) -> List[Tuple[int, str]]:
    """
        Gets the addresses bound to the specified interface name.

        :param ifname: The interface name to lookup the addresses for.
        :param ifindex: The interface index, used for error reporting.

        :returns: A list of (address family, address) pairs.

        :raises NetworkAdapterAddressesFetchingError: The addresses could not be fetched.
    """
    try:
        address_info = netifaces.ifaddresses(ifname)
    except (OSError, ValueError) as xcpt:
        errmsg = "The following error occurred when fetching the addresses of the network adapter of index {}: {}".format(
            ifindex, xcpt)
        raise NetworkAdapterAddressesFetchingError(errmsg, ifname, ifindex) from xcpt

    addresses = []

    if address_info is not None:
        for addr_family, faddr_list in address_info.items():
            for faddr in faddr_list:
                if 'addr' in faddr:
                    addresses.append((addr_family, faddr['addr']))

    return addresses


def get_network_adapter(ifname: str) -> NetworkAdapter:
    """
        Looks up a network adapter by name.

        :param ifname: The name of the network adapter.

        :returns: The :class:`NetworkAdapter` for the name.

        :raises NetworkAdapterFetchingError: No adapter exists with the specified name.
        :raises NetworkAdapterAddressesFetchingError: The adapter addresses could not be fetched.
    """
    try:
        iface_name_list = netifaces.interfaces()
    except OSError as xcpt:
        errmsg = "The following error occurred when fetching the network adapter named {}: {}".format(ifname, xcpt)
        raise NetworkAdapterFetchingError(errmsg, ifname) from xcpt

    if ifname not in iface_name_list:
        errmsg = "The following error occurred when fetching the network adapter named {}: no such network interface".format(
            ifname)
        raise NetworkAdapterFetchingError(errmsg, ifname)

    ifindex = get_adapter_index(ifname)
    addresses = get_adapter_addresses(ifname, ifindex)

    return NetworkAdapter(name=ifname, index=ifindex, addresses=addresses)


def get_network_adapters() -> List[NetworkAdapter]:
    """
        Gets all of the network adapters of the system in the order the operating system
        reports them.  A failure to fetch the addresses of any one adapter fails the
        whole enumeration.

        :raises NetworkAdaptersFetchingError: The adapter list could not be fetched.
        :raises NetworkAdapterAddressesFetchingError: The addresses of an adapter could not be fetched.
    """
    try:
        iface_name_list = [ iface for iface in netifaces.interfaces() ]
    except OSError as xcpt:
        errmsg = "The following error occurred when fetching the network adapters of the system: {}".format(xcpt)
        raise NetworkAdaptersFetchingError(errmsg) from xcpt

    adapters = []
    for ifname in iface_name_list:
        ifindex = get_adapter_index(ifname)
        addresses = get_adapter_addresses(ifname, ifindex)
        adapters.append(NetworkAdapter(name=ifname, index=ifindex, addresses=addresses))

    return adapters


def is_loopback_ipv4_address(addr: str) -> bool:
    return ipaddress.IPv4Address(addr) in IPV4_LOOPBACK


def select_source_address(addresses: Sequence[Tuple[int, str]]) -> Optional[str]:
    """
        Selects the first IPv4 address that is not a loopback address.  IPv6, link layer
        and loopback addresses are skipped wherever they appear in the sequence.

        :param addresses: The (address family, address) pairs of an adapter.

        :returns: The selected IPv4 address or None if the adapter has no usable address.
    """
    selected = None

    for addr_family, addr in addresses:
        if addr_family != netifaces.AF_INET:
            continue

        if is_loopback_ipv4_address(addr):
            logger.debug("Skipping loopback address addr=%s", addr)
            continue

        selected = addr
        break

    return selected


def resolve_source_endpoint(config: "WakeOnLanConfig") -> Optional[Tuple[str, int]]:
    """
        Resolves the local endpoint the magic packet socket should be bound with.

        :param config: The configuration naming the network adapter to send from.

        :returns: The (address, port) local endpoint, or None when no adapter was named
                  and the operating system routing should pick the local endpoint.

        :raises NetworkAdapterFetchingError: The named adapter does not exist.
        :raises NetworkAdapterAddressesFetchingError: The adapter addresses could not be fetched.
        :raises NoUsableNetworkAdapterAddressError: The adapter has no usable IPv4 address.
    """
    ifname = config.network_adapter_name
    if ifname is None:
        logger.debug("No network adapter specified, using the default route for the local address.")
        return None

    adapter = get_network_adapter(ifname)

    source_addr = adapter.source_address
    if source_addr is None:
        errmsg = "The network adapter named {} has no non-loopback IPv4 address to send from.".format(ifname)
        raise NoUsableNetworkAdapterAddressError(errmsg, ifname)

    logger.debug("Selected source address addr=%s ifname=%s ifindex=%d", source_addr, ifname, adapter.index)

    return (source_addr, WAKE_ON_LAN_UDP_PORT)
