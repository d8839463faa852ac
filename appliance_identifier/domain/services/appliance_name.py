"""Turn raw classifier labels into human-readable appliance names."""

_TOKEN_SEPARATOR = " "


def normalize_appliance_label(label: str) -> str:
    """
    Strip a leading namespace token and replace underscores.

    The label is split on single spaces. When there is more than one
    token the first one (e.g. a WordNet synset id) is dropped and the
    rest are joined back with single spaces. Underscores always become
    spaces.

    >>> normalize_appliance_label("n07697537 washing_machine")
    'washing machine'
    >>> normalize_appliance_label("a_b c_d")
    'c d'
    """
    tokens = label.split(_TOKEN_SEPARATOR)
    if len(tokens) > 1:
        label = _TOKEN_SEPARATOR.join(tokens[1:])
    return label.replace("_", " ")
