"""
.. module:: wakeonlan
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The wakeonlan package contains modules for building and broadcasting Wake-on-LAN
               magic packets from a selected network adapter.

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
