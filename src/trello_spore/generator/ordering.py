"""Output ordering for the descriptor JSON.

Fixed keys always sort first, in a readable order. Method names sort
after them, in the order they were first discovered.
"""

TOP_LEVEL_RANKS = {
    "name": 0,
    "version": 1,
    "base_url": 2,
    "formats": 3,
    "methods": 4,
}

RECORD_RANKS = {
    "path": 0,
    "method": 1,
    "required_params": 2,
    "optional_params": 3,
    "_params_infos": 4,
}

FIRST_METHOD_RANK = max(*TOP_LEVEL_RANKS.values(), *RECORD_RANKS.values()) + 1


class OrderingAssigner:
    """Hands out increasing ranks to method names, once per name."""

    def __init__(self, start: int = FIRST_METHOD_RANK):
        self.next_rank = start
        self.ranks: dict[str, int] = {}

    def assign(self, name: str) -> int:
        """Rank of ``name``; the first call for a name takes the next value."""
        if name not in self.ranks:
            self.ranks[name] = self.next_rank
            self.next_rank += 1
        return self.ranks[name]

    def rank(self, key: str) -> int:
        """Sort rank of any key of the output; unknown keys rank 0."""
        if key in TOP_LEVEL_RANKS:
            return TOP_LEVEL_RANKS[key]
        if key in RECORD_RANKS:
            return RECORD_RANKS[key]
        return self.ranks.get(key, 0)

    def ordered(self, payload):
        """Copy of ``payload`` with every mapping re-keyed in rank order.

        Keys of equal rank keep their current relative order.
        """
        if isinstance(payload, dict):
            items = sorted(payload.items(), key=lambda item: self.rank(item[0]))
            return {key: self.ordered(value) for key, value in items}
        if isinstance(payload, list):
            return [self.ordered(value) for value in payload]
        return payload
