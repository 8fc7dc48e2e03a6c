from dataclasses import dataclass

@dataclass
class Settings:
    max_hops: int = 30
    probe_timeout: int = 5            # seconds to wait per probe (traceroute -w)
    traceroute_bin: str = "traceroute"
    traceroute6_bin: str = "traceroute6"  # picked when the target contains a colon
    host_bin: str = "host"            # reverse lookups of hop addresses

    # placeholder when a message names no application
    unknown_application: str = "Unknown Application"
