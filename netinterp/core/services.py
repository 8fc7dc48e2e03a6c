# netinterp/core/services.py
from enum import Enum
from typing import Optional


class KnownService(Enum):
    """Well-known services keyed by their port number."""
    HTTP = 80
    HTTPS = 443
    DNS = 53
    MDNS = 5353
    SSH = 22
    FTP = 21
    SMTP = 25
    POP3 = 110
    IMAP = 143
    NTP = 123
    LDAP = 389
    RDP = 3389
    MYSQL = 3306
    POSTGRESQL = 5432
    REDIS = 6379
    MONGODB = 27017

    @property
    def port(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY[self][0]

    @property
    def description(self) -> str:
        return _DISPLAY[self][1]

    @classmethod
    def from_port(cls, port: int) -> Optional["KnownService"]:
        try:
            return cls(port)
        except ValueError:
            return None

    @classmethod
    def from_name(cls, name: str) -> Optional["KnownService"]:
        if not name:
            return None
        return _NAMES.get(name.lower())


_DISPLAY = {
    KnownService.HTTP: ("HTTP", "Web traffic (unencrypted)"),
    KnownService.HTTPS: ("HTTPS", "Secure web traffic"),
    KnownService.DNS: ("DNS", "Domain Name System queries"),
    KnownService.MDNS: ("mDNS (Bonjour)", "Multicast DNS for local network discovery (Bonjour)"),
    KnownService.SSH: ("SSH", "Secure Shell remote access"),
    KnownService.FTP: ("FTP", "File Transfer Protocol"),
    KnownService.SMTP: ("SMTP", "Email sending"),
    KnownService.POP3: ("POP3", "Email retrieval"),
    KnownService.IMAP: ("IMAP", "Email access"),
    KnownService.NTP: ("NTP", "Network Time Protocol"),
    KnownService.LDAP: ("LDAP", "Directory services"),
    KnownService.RDP: ("RDP", "Remote Desktop Protocol"),
    KnownService.MYSQL: ("MySQL", "MySQL database"),
    KnownService.POSTGRESQL: ("PostgreSQL", "PostgreSQL database"),
    KnownService.REDIS: ("Redis", "Redis cache/database"),
    KnownService.MONGODB: ("MongoDB", "MongoDB database"),
}

# canonical names first, then aliases
_NAMES = {svc.name.lower(): svc for svc in KnownService}
_NAMES.update({
    "domain": KnownService.DNS,
    "mail": KnownService.SMTP,
    "postgres": KnownService.POSTGRESQL,
    "mongo": KnownService.MONGODB,
})
