"""QR code matrix generation: encoding, error correction, module placement and masking."""

__version__ = "2.0.0"