"""
.. module:: hardwareaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for parsing and checking hardware (MAC) addresses.

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

from mojo.wakeonlan.constants import (
    EUI48_LENGTH,
    EUI64_LENGTH,
    INFINIBAND_HWADDR_LENGTH,
    REGEX_HWADDR_DOTTED,
    REGEX_HWADDR_OCTETS
)
from mojo.wakeonlan.exceptions import MacAddressNotEUI48Error, MacAddressParseError

VALID_HWADDR_LENGTHS = (EUI48_LENGTH, EUI64_LENGTH, INFINIBAND_HWADDR_LENGTH)


def parse_mac_address(address_text: str) -> bytes:
    """
        Parses a hardware address in one of the following formats:

            00:00:5e:00:53:01
            00-00-5e-00-53-01
            0000.5e00.5301

        EUI-64 and 20 octet IP over InfiniBand link-layer addresses are accepted
        as well, use :func:`check_eui48_address` to require an EUI-48 address.

        :param address_text: The hardware address text to parse.

        :returns: The raw bytes of the hardware address.

        :raises MacAddressParseError: The text is not a hardware address.
    """
    hex_digits = None
    if REGEX_HWADDR_OCTETS.fullmatch(address_text) is not None:
        hex_digits = address_text.replace(address_text[2], "")
    elif REGEX_HWADDR_DOTTED.fullmatch(address_text) is not None:
        hex_digits = address_text.replace(".", "")

    if hex_digits is None or (len(hex_digits) // 2) not in VALID_HWADDR_LENGTHS:
        errmsg = "Could not parse MAC address. address={}".format(address_text)
        raise MacAddressParseError(errmsg, address_text)

    return bytes.fromhex(hex_digits)


def check_eui48_address(hwaddr: bytes) -> bytes:
    """
        Checks that the hardware address is an EUI-48 identifier.

        :raises MacAddressNotEUI48Error: The address is not exactly 6 bytes long.
    """
    if len(hwaddr) != EUI48_LENGTH:
        errmsg = "MAC address must be an EUI-48 identifier. address={} length={}".format(
            format_mac_address(hwaddr), len(hwaddr))
        raise MacAddressNotEUI48Error(errmsg)

    return hwaddr


def format_mac_address(hwaddr: bytes) -> str:
    return ":".join("{:02x}".format(b) for b in hwaddr)
