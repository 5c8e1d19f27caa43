"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants associated with the Wake-on-LAN protocol.

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

import re

EUI48_LENGTH = 6
EUI64_LENGTH = 8
INFINIBAND_HWADDR_LENGTH = 20

MAGIC_PACKET_SYNC_STREAM = b"\xff" * EUI48_LENGTH
MAGIC_PACKET_REPEAT_COUNT = 16
MAGIC_PACKET_LENGTH = len(MAGIC_PACKET_SYNC_STREAM) + (MAGIC_PACKET_REPEAT_COUNT * EUI48_LENGTH)

WAKE_ON_LAN_UDP_PORT = 7
WAKE_ON_LAN_BROADCAST_ADDRESS = "255.255.255.255"

IPV4_LOOPBACK_NETWORK = "127.0.0.0/8"

ENV_NETWORK_ADAPTER = "MOJO_WAKEONLAN_NETWORK_ADAPTER"

# aa:bb:cc:dd:ee:ff or aa-bb-cc-dd-ee-ff, the separator must be consistent
REGEX_HWADDR_OCTETS = re.compile(r"^[0-9a-fA-F]{2}(?P<sep>[:-])[0-9a-fA-F]{2}(?:(?P=sep)[0-9a-fA-F]{2})*$")

# aabb.ccdd.eeff
REGEX_HWADDR_DOTTED = re.compile(r"^[0-9a-fA-F]{4}(?:\.[0-9a-fA-F]{4})+$")
