"""Command argument tokenizer."""

NO_TAIL = -1


def tokenize(prefix: str, raw_message: str, tail_index: int, tail_separator: str) -> list[str]:
    """
    Split a chat command into argument tokens.

    The prefix is removed and the rest is split on whitespace. With
    tail_index == NO_TAIL the whitespace tokens are returned as-is. Otherwise
    the first tail_index tokens are kept as positional arguments and the
    remainder is rejoined with single spaces into a free-text tail, which is
    returned whole (empty separator) or split on tail_separator.

    Examples:
        tokenize('!compare', '!compare season lebron james/luka doncic', 1, '/')
        -> ['season', 'lebron james', 'luka doncic']

        tokenize('!scoreboard', '!scoreboard 5', NO_TAIL, '')
        -> ['5']

    An empty tail still produces one '' token; arity checks belong to the caller.
    """
    if tail_index < NO_TAIL:
        raise ValueError(f'tail_index must be >= {NO_TAIL}, got {tail_index}')

    if raw_message.startswith(prefix):
        raw_message = raw_message[len(prefix):]
    tokens = raw_message.split()

    if tail_index == NO_TAIL:
        return tokens

    positional = tokens[:tail_index]
    tail = ' '.join(tokens[tail_index:])
    if not tail_separator:
        return positional + [tail]
    return positional + tail.split(tail_separator)
