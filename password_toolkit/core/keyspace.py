"""
Candidate keyspace for the brute-force search.

Maps numeric positions to the fixed-width decimal candidates that are hashed.
"""


class NumericCandidateGenerator:
    """Zero-padded decimal candidates of a fixed length"""

    def __init__(self, length: int = 6):
        """Initialize with candidate length"""
        if length < 1:
            raise ValueError("Candidate length must be at least 1")
        self.length = length

    @property
    def byte_template(self) -> bytes:
        """Bytes %-format that renders a position as candidate bytes"""
        return b"%0" + str(self.length).encode("ascii") + b"d"

    def get_total_count(self) -> int:
        """Get the total number of possible candidates"""
        return 10 ** self.length

    def position_to_password(self, position: int) -> str:
        """Convert a numeric position to a candidate"""
        if position < 0 or position >= self.get_total_count():
            raise ValueError(f"Position must be between 0 and {self.get_total_count() - 1}")
        return str(position).zfill(self.length)


SIX_DIGIT_KEYSPACE = NumericCandidateGenerator(6)
