"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised for the exceptional conditions
               encountered while waking a remote computer.

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

from enum import IntEnum


class ExitCode(IntEnum):
    """
        The process exit codes, one per distinct fatal condition so that scripts
        can tell failure causes apart.
    """
    SUCCESS = 0
    FATAL = 1
    MAC_ADDRESS_UNPARSEABLE = 2
    MAC_ADDRESS_NOT_EUI48 = 3
    MAC_ADDRESS_NOT_INFORMED = 4
    NETWORK_ADAPTER_ADDRESSES_FETCHING = 5
    NETWORK_ADAPTER_FETCHING = 6
    NETWORK_ADAPTERS_FETCHING = 7
    NOT_ALL_PAYLOAD_BYTES_SENT = 8
    UDP_CONNECTION = 9
    PAYLOAD_SENDING = 10
    NO_USABLE_NETWORK_ADAPTER_ADDRESS = 11


class WakeOnLanError(RuntimeError):
    """
        The base error for all the fatal Wake-on-LAN conditions.  Each subclass carries the
        exit code the command line reports for it.
    """
    exit_code = ExitCode.FATAL


class MacAddressError(WakeOnLanError):
    """
        The base error for hardware address input validation errors.
    """


class MacAddressParseError(MacAddressError):
    """
        Raised when the hardware address text could not be parsed.
    """
    exit_code = ExitCode.MAC_ADDRESS_UNPARSEABLE

    def __init__(self, message, address_text, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.address_text = address_text
        return


class MacAddressNotEUI48Error(MacAddressError):
    """
        Raised when a parsed hardware address is not a 6 byte EUI-48 identifier.
    """
    exit_code = ExitCode.MAC_ADDRESS_NOT_EUI48


class MacAddressNotInformedError(MacAddressError):
    """
        Raised when a wake is requested without a hardware address.
    """
    exit_code = ExitCode.MAC_ADDRESS_NOT_INFORMED


class NetworkAdapterError(WakeOnLanError):
    """
        The base error for network adapter lookup and enumeration errors.
    """


class NetworkAdapterAddressesFetchingError(NetworkAdapterError):
    exit_code = ExitCode.NETWORK_ADAPTER_ADDRESSES_FETCHING

    def __init__(self, message, ifname, ifindex, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.ifname = ifname
        self.ifindex = ifindex
        return


class NetworkAdapterFetchingError(NetworkAdapterError):
    exit_code = ExitCode.NETWORK_ADAPTER_FETCHING

    def __init__(self, message, ifname, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.ifname = ifname
        return


class NetworkAdaptersFetchingError(NetworkAdapterError):
    exit_code = ExitCode.NETWORK_ADAPTERS_FETCHING


class NoUsableNetworkAdapterAddressError(NetworkAdapterError):
    """
        Raised when a named network adapter has no non-loopback IPv4 address to bind to.
    """
    exit_code = ExitCode.NO_USABLE_NETWORK_ADAPTER_ADDRESS

    def __init__(self, message, ifname, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.ifname = ifname
        return


class TransmissionError(WakeOnLanError):
    """
        The base error for socket and payload transmission errors.
    """


class UdpConnectionError(TransmissionError):
    exit_code = ExitCode.UDP_CONNECTION


class PayloadSendingError(TransmissionError):
    exit_code = ExitCode.PAYLOAD_SENDING


class NotAllPayloadBytesSentError(TransmissionError):
    """
        Raised when the transport accepted fewer bytes than the full magic packet.
    """
    exit_code = ExitCode.NOT_ALL_PAYLOAD_BYTES_SENT

    def __init__(self, message, bytes_sent, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.bytes_sent = bytes_sent
        return
