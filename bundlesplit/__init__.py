"""
bundlesplit: device-configuration splitting for packaged app modules.

Partitions a module's contents into splits targeted at device configurations
(such as processor architecture) and computes the targeting metadata an
installer uses to select among them.
"""

__version__ = "1.0.0"
__author__ = "bundlesplit Team"
