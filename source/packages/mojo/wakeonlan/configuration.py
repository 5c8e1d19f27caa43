"""
.. module:: configuration
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the immutable configuration value for a Wake-on-LAN invocation.

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

from typing import Mapping, Optional

import os

from mojo.wakeonlan.constants import ENV_NETWORK_ADAPTER


class WakeOnLanConfig:
    """
        The settings for a single invocation.  The values are fixed at construction and
        passed explicitly to the resolver and the sender.
    """

    def __init__(self, *, mac_address: Optional[str] = None, network_adapter_name: Optional[str] = None,
                 list_network_adapters: bool = False, verbose: bool = False):
        self._mac_address = mac_address
        self._network_adapter_name = network_adapter_name if network_adapter_name else None
        self._list_network_adapters = list_network_adapters
        self._verbose = verbose
        return

    @property
    def list_network_adapters(self) -> bool:
        return self._list_network_adapters

    @property
    def mac_address(self) -> Optional[str]:
        """
            The unparsed hardware address text of the computer to wake.
        """
        return self._mac_address

    @property
    def network_adapter_name(self) -> Optional[str]:
        """
            The name of the network adapter to send from, None to let the routing table decide.
        """
        return self._network_adapter_name

    @property
    def verbose(self) -> bool:
        return self._verbose

    def __repr__(self) -> str:
        return "WakeOnLanConfig(mac_address={!r}, network_adapter_name={!r}, list_network_adapters={}, verbose={})".format(
            self._mac_address, self._network_adapter_name, self._list_network_adapters, self._verbose)


def create_config(*, mac_address: Optional[str] = None, network_adapter_name: Optional[str] = None,
                  list_network_adapters: bool = False, verbose: bool = False,
                  environ: Optional[Mapping[str, str]] = None) -> WakeOnLanConfig:
    """
        Creates a :class:`WakeOnLanConfig`, filling in the network adapter name from the
        MOJO_WAKEONLAN_NETWORK_ADAPTER environment variable when one was not specified.
    """
    if environ is None:
        environ = os.environ

    if not network_adapter_name:
        network_adapter_name = environ.get(ENV_NETWORK_ADAPTER, None)

    config = WakeOnLanConfig(mac_address=mac_address, network_adapter_name=network_adapter_name,
        list_network_adapters=list_network_adapters, verbose=verbose)

    return config
