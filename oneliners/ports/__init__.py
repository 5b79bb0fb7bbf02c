# Ports (Protocol interfaces); implementations live in oneliners.adapters

from oneliners.ports.randomness import RandomPort

__all__ = ["RandomPort"]
