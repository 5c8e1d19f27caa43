"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains the magic packet sender and broadcast helper functions.

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

from typing import Optional, Tuple, Type

from enum import Enum
from types import TracebackType

import logging
import socket

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import (
    MAGIC_PACKET_LENGTH,
    WAKE_ON_LAN_BROADCAST_ADDRESS,
    WAKE_ON_LAN_UDP_PORT
)
from mojo.wakeonlan.exceptions import (
    NotAllPayloadBytesSentError,
    PayloadSendingError,
    UdpConnectionError
)
from mojo.wakeonlan.magicpacket import create_magic_packet

logger = logging.getLogger()

BROADCAST_ENDPOINT = (WAKE_ON_LAN_BROADCAST_ADDRESS, WAKE_ON_LAN_UDP_PORT)


class SenderState(Enum):
    IDLE = "idle"
    CONNECTED = "connected"
    SENT = "sent"
    CLOSED = "closed"


def format_endpoint(endpoint: Optional[Tuple[str, int]]) -> str:
    if endpoint is None:
        return "unspecified"
    return "{}:{}".format(*endpoint)


class MagicPacketSender:
    """
        Sends a single magic packet to the broadcast address.  The sender moves through
        the states IDLE -> CONNECTED -> SENT -> CLOSED and none of the steps are retried.

        .. code-block:: python

            with MagicPacketSender(local_endpoint=("192.168.1.10", 7)) as sender:
                sender.send(create_magic_packet(hwaddr))
    """

    def __init__(self, local_endpoint: Optional[Tuple[str, int]] = None):
        """
            :param local_endpoint: The (address, port) to bind the socket with, None to let
                                   the operating system pick the local endpoint.
        """
        self._local_endpoint = local_endpoint
        self._remote_endpoint = BROADCAST_ENDPOINT
        self._sock = None
        self._state = SenderState.IDLE
        return

    def __enter__(self) -> "MagicPacketSender":
        self.open()
        return self

    def __exit__(self, ex_type: Type[BaseException], ex_inst: BaseException, ex_tb: TracebackType) -> bool:
        self.close()
        return False

    @property
    def local_address(self) -> Optional[Tuple[str, int]]:
        """
            The local endpoint of the socket once connected, otherwise the requested endpoint.
        """
        laddr = self._local_endpoint
        if self._sock is not None:
            laddr = self._sock.getsockname()
        return laddr

    @property
    def remote_address(self) -> Tuple[str, int]:
        return self._remote_endpoint

    @property
    def state(self) -> SenderState:
        return self._state

    def open(self):
        """
            Opens the UDP socket, binds it with the local endpoint and connects it to the
            broadcast address.

            :raises UdpConnectionError: The socket could not be opened, bound or connected.
        """
        if self._state != SenderState.IDLE:
            raise SemanticError("The sender can only be opened once. state={}".format(self._state.value))

        sock = None
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            if self._local_endpoint is not None:
                sock.bind(self._local_endpoint)
            sock.connect(self._remote_endpoint)
        except OSError as os_err:
            if sock is not None:
                sock.close()
            errmsg = "The following error occurred when trying to connect to the remote address {} from the local address {}: {}".format(
                format_endpoint(self._remote_endpoint), format_endpoint(self._local_endpoint), os_err)
            raise UdpConnectionError(errmsg) from os_err

        self._sock = sock
        self._state = SenderState.CONNECTED

        return

    def send(self, payload: bytes):
        """
            Writes the payload to the socket in a single operation.

            :raises PayloadSendingError: The write failed.
            :raises NotAllPayloadBytesSentError: The transport did not accept the whole payload.
        """
        if self._state != SenderState.CONNECTED:
            raise SemanticError("The sender must be connected before sending. state={}".format(self._state.value))

        logger.info("Sending magic packet to %s from %s", format_endpoint(self.remote_address),
            format_endpoint(self.local_address))

        try:
            bytes_sent = self._sock.send(payload)
        except OSError as os_err:
            errmsg = "The following error occurred when sending the Wake-on-LAN payload: {}".format(os_err)
            raise PayloadSendingError(errmsg) from os_err

        if bytes_sent != MAGIC_PACKET_LENGTH:
            errmsg = "Not all {} bytes of the payload were sent to the remote address. sent={}".format(
                MAGIC_PACKET_LENGTH, bytes_sent)
            raise NotAllPayloadBytesSentError(errmsg, bytes_sent)

        self._state = SenderState.SENT

        return

    def close(self):
        """
            Releases the socket.  Safe to call in any state.
        """
        if self._sock is not None:
            self._sock.close()
            self._sock = None
        self._state = SenderState.CLOSED
        return


def broadcast_wake_on_lan_magic_message(hwaddr: bytes, local_endpoint: Optional[Tuple[str, int]] = None):
    """
        Broadcasts the magic packet for the hardware address to 255.255.255.255 port 7.

        :param hwaddr: The raw 6 byte EUI-48 address of the computer to wake.
        :param local_endpoint: The (address, port) to bind the socket with or None.
    """
    payload = create_magic_packet(hwaddr)

    with MagicPacketSender(local_endpoint=local_endpoint) as sender:
        sender.send(payload)

    return
