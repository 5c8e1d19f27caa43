"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The command line entry point for waking remote computers and listing the
               network adapters that can be used to send from.

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

from typing import List, Optional

import argparse
import logging
import sys

from mojo.wakeonlan.broadcast import MagicPacketSender, format_endpoint
from mojo.wakeonlan.configuration import WakeOnLanConfig, create_config
from mojo.wakeonlan.exceptions import ExitCode, MacAddressNotInformedError, WakeOnLanError
from mojo.wakeonlan.hardwareaddress import check_eui48_address, parse_mac_address
from mojo.wakeonlan.interfaces import get_network_adapters, resolve_source_endpoint
from mojo.wakeonlan.magicpacket import create_magic_packet

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger()


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mojo-wakeonlan",
        description="Wakes a remote computer by broadcasting a Wake-on-LAN magic packet.")

    parser.add_argument("-mac-address", "--mac-address", dest="mac_address", metavar="mac address", default=None,
        help="mac address of the computer to be awaken")
    parser.add_argument("-network-adapter-name", "--network-adapter-name", dest="network_adapter_name", metavar="name",
        default=None, help="name of the network adapter to be used")
    parser.add_argument("-list-network-adapters", "--list-network-adapters", dest="list_network_adapters",
        action="store_true", default=False, help="lists system network adapters")
    parser.add_argument("-verbose", "--verbose", dest="verbose", action="store_true", default=False,
        help="log debug details to the error stream")

    return parser


def list_network_adapters():
    """
        Prints the local IPv4 address and the name of each network adapter that has a
        usable address.
    """
    for adapter in get_network_adapters():
        source_addr = adapter.source_address
        if source_addr is not None:
            print("Local Address: {:<15} | Name: {}".format(source_addr, adapter.name))
        else:
            logger.debug("Network adapter has no usable address ifname=%s", adapter.name)

    return


def wake_remote_computer(config: WakeOnLanConfig):
    """
        Validates the hardware address from the configuration and broadcasts the magic
        packet for it.
    """
    if config.mac_address is None:
        raise MacAddressNotInformedError("No MAC address informed. See program usage (-h flag).")

    hwaddr = check_eui48_address(parse_mac_address(config.mac_address))
    payload = create_magic_packet(hwaddr)

    local_endpoint = resolve_source_endpoint(config)

    with MagicPacketSender(local_endpoint=local_endpoint) as sender:
        print("Sending Wake-on-LAN payload to the remote address {} from the local address {}.".format(
            format_endpoint(sender.remote_address), format_endpoint(sender.local_address)))
        sender.send(payload)
        print("Wake-on-LAN payload sent.")

    return


def run(config: WakeOnLanConfig) -> int:
    """
        Dispatches the configuration to the listing or the wake operation and maps any
        fatal error to its exit code.
    """
    exit_code = ExitCode.SUCCESS

    try:
        # A given address must parse even when only listing
        if config.mac_address is not None:
            parse_mac_address(config.mac_address)

        if config.list_network_adapters:
            list_network_adapters()
        else:
            wake_remote_computer(config)
    except WakeOnLanError as xcpt:
        logger.debug("Fatal error: %r", xcpt)
        print(str(xcpt), file=sys.stderr)
        exit_code = xcpt.exit_code

    return int(exit_code)


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = create_config(mac_address=args.mac_address, network_adapter_name=args.network_adapter_name,
        list_network_adapters=args.list_network_adapters, verbose=args.verbose)

    log_level = logging.DEBUG if config.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
