"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that builds the Wake-on-LAN magic packet payload.

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

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import (
    EUI48_LENGTH,
    MAGIC_PACKET_REPEAT_COUNT,
    MAGIC_PACKET_SYNC_STREAM
)


def create_magic_packet(hwaddr: bytes) -> bytes:
    """
        Creates the Wake-on-LAN magic packet for the specified hardware address.

            [FF FF FF FF FF FF] + [hwaddr] * 16   ( len 102 bytes )

        :param hwaddr: The raw 6 byte EUI-48 address of the computer to wake.  The
                       caller is responsible for validating the address.

        :returns: The magic packet payload.
    """
    if len(hwaddr) != EUI48_LENGTH:
        errmsg = "The magic packet can only be created from an EUI-48 address. length={}".format(len(hwaddr))
        raise SemanticError(errmsg)

    return MAGIC_PACKET_SYNC_STREAM + bytes(hwaddr) * MAGIC_PACKET_REPEAT_COUNT
