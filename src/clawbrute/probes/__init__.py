"""Protocol probes and the probe registry.

Importing this package registers the built-in probes.
"""

from . import ftp, http, mail, mysql, postgres, redis, ssh, telnet  # noqa: F401
from .base import LoginProbe, NetworkProbe
from .config import (
    HTTPLoginConfig,
    HTTPProbeConfig,
    LoginProbeConfig,
    MailProbeConfig,
    MySQLProbeConfig,
    PostgresProbeConfig,
    TCPProbeConfig,
)
from .ftp import FTPProbe
from .helpers import LineConnection, connect_lines, open_connection, with_timeout
from .http import HTTPBasicAuthProbe, HTTPLoginProbe, HTTPProbe
from .mail import IMAPProbe, MailProbe, POP3Probe
from .mysql import MySQLProbe
from .postgres import PostgresProbe
from .redis import RedisProbe
from .registry import (
    available_probes,
    build_probe_factory,
    load_probe,
    load_probe_file,
    register,
    unregister,
)
from .ssh import SSHProbe
from .telnet import TelnetProbe

__all__ = [
    "FTPProbe",
    "HTTPBasicAuthProbe",
    "HTTPLoginConfig",
    "HTTPLoginProbe",
    "HTTPProbe",
    "HTTPProbeConfig",
    "IMAPProbe",
    "LineConnection",
    "LoginProbe",
    "LoginProbeConfig",
    "MailProbe",
    "MailProbeConfig",
    "MySQLProbe",
    "MySQLProbeConfig",
    "NetworkProbe",
    "POP3Probe",
    "PostgresProbe",
    "PostgresProbeConfig",
    "RedisProbe",
    "SSHProbe",
    "TCPProbeConfig",
    "TelnetProbe",
    "available_probes",
    "build_probe_factory",
    "connect_lines",
    "load_probe",
    "load_probe_file",
    "open_connection",
    "register",
    "unregister",
    "with_timeout",
]
