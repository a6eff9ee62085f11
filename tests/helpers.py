class FakeStore:
    """In-memory stand-in for HighScoreStore that records saves."""

    def __init__(self, score=0, save_ok=True):
        self.score = score
        self.save_ok = save_ok
        self.saves = []

    def load(self):
        return self.score

    def save(self, score):
        self.saves.append(score)
        return self.save_ok
