"""Item paths, scene interfaces, query commands and RPC value conversion for driving a user interface from tests."""

__version__ = "0.1.0"