"""Abstract player interface for human or AI controllers."""


class Player:
    def __init__(self, side):
        self.side = side

    def get_move(self, board, deadline=None):
        """Return the next move as a "row col" string."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, side):
        super().__init__(side)

    def get_move(self, board, deadline=None):
        """Text-input player with deadline guard (raises TimeoutError on timeout)."""
        import os
        import sys
        import time

        prompt = f"{self.side} to move. Enter move as 'row col' (1-indexed): "
        if deadline is None:
            raw = input(prompt).strip()
        else:
            remaining = deadline - time.time()
            if remaining <= 0:
                raise TimeoutError("Move exceeded allotted time")

            sys.stdout.write(prompt)
            sys.stdout.flush()
            if os.name == "nt":
                # Windows: select() on stdin is not supported. Poll with msvcrt.
                import msvcrt

                buffer = ""
                while time.time() < deadline:
                    if msvcrt.kbhit():
                        ch = msvcrt.getwche()
                        if ch in ("\r", "\n"):
                            sys.stdout.write("\n")
                            break
                        buffer += ch
                    time.sleep(0.01)
                else:
                    raise TimeoutError("Move exceeded allotted time")
                raw = buffer.strip()
            else:
                import select

                rlist, _, _ = select.select([sys.stdin], [], [], remaining)
                if not rlist:
                    raise TimeoutError("Move exceeded allotted time")
                raw = sys.stdin.readline().strip()

        try:
            row_str, col_str = raw.split()
            return f"{int(row_str)} {int(col_str)}"
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
