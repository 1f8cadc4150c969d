from mjcodec.tiles import Tile, hand_to_names, names_to_hand


def hand_input(description: str, default: list[Tile] | None = None, retry: int = 0) -> list[Tile]:
    """Ask user for a hand in tile-name notation, retry if invalid input is given"""
    if default is None:
        default = []
    prompt = f"{description} (e.g. 2m 3m 4m 5pr E C): "
    for _ in range(retry + 1):
        try:
            return names_to_hand(input(prompt))
        except ValueError as e:
            prompt = f"Invalid input ({e}), please enter tile names separated by spaces: "
    print(f"Using default hand: {hand_to_names(default) or '(empty)'}")
    return default
