"""Password assembly: trim the accepted buffer and decode it to text."""

# Byte values map one-to-one onto code points 0-255.
ENCODING = "latin-1"


class PasswordAssembler:
    """Turns accumulated bytes into the final fixed-length password."""

    def assemble(self, buffer: bytes, length: int) -> str:
        """
        Keep the first ``length`` accepted bytes and decode them.

        Bytes accepted beyond ``length`` are discarded, never reused.

        Raises:
            ValueError: If the buffer holds fewer than ``length`` bytes
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if len(buffer) < length:
            raise ValueError(f"Buffer holds {len(buffer)} bytes, {length} required")
        return bytes(buffer[:length]).decode(ENCODING)
