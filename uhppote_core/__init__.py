"""Value types, wire and JSON encodings, and UDP/TCP transport for UHPPOTE UT0311-L0x controllers."""

__version__ = "0.1.0"