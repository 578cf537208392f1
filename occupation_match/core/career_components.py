from occupation_match.ingestion import utils


RIASEC_CATEGORIES = (
    "realistic",
    "investigative",
    "artistic",
    "social",
    "enterprising",
    "conventional",
)


# Interests are the user's self-reported RIASEC scores
'''
realistic: Building, fixing, operating tools and machines, physical work
investigative: Observing, researching, analysing, solving abstract problems
artistic: Creating, designing, performing, unstructured self-expression
social: Helping, teaching, caring for and informing other people
enterprising: Persuading, leading, selling, taking business risks
conventional: Organising data, following procedures, detail-oriented office work
'''

class Interests:
    INTEREST_TYPES = list(RIASEC_CATEGORIES)
    DEFAULT_SCORE = 50.0

    def __init__(self, scores=None):
        self.scores = {interest: self.DEFAULT_SCORE for interest in self.INTEREST_TYPES}

        if scores is None:
            return

        if isinstance(scores, dict):
            for interest, value in scores.items():
                self.set(interest, value)
            return

        values = list(scores)
        if len(values) != len(self.INTEREST_TYPES):
            raise ValueError(
                f"Expected {len(self.INTEREST_TYPES)} interest scores, got {len(values)}"
            )

        for interest, value in zip(self.INTEREST_TYPES, values):
            self.set(interest, value)

    def set(self, interest, value):
        if interest not in self.scores:
            raise ValueError(f"Invalid interest: {interest}")

        self.scores[interest] = utils.clamp(value)

    def set_index(self, index: int, value: float):
        self.set(self.INTEREST_TYPES[index], value)

    def as_vector(self) -> list[float]:
        return [self.scores[interest] for interest in self.INTEREST_TYPES]

    def __eq__(self, other):
        if not isinstance(other, Interests):
            return NotImplemented
        return self.scores == other.scores

    def __repr__(self):
        return f"Interests({self.scores})"


# Weights set the emphasis of each category in the weighted cosine
class WeightProfile:
    def __init__(self, weights):
        weights = [float(w) for w in weights]

        if len(weights) != len(RIASEC_CATEGORIES):
            raise ValueError(
                f"Expected {len(RIASEC_CATEGORIES)} weights, got {len(weights)}"
            )

        for category, weight in zip(RIASEC_CATEGORIES, weights):
            if weight < 0:
                raise ValueError(f"Weight for {category} must be non-negative: {weight}")

        self.weights = tuple(weights)

    def __iter__(self):
        return iter(self.weights)

    def __getitem__(self, index):
        return self.weights[index]

    def __len__(self):
        return len(self.weights)

    def __repr__(self):
        return f"WeightProfile({list(self.weights)})"


UNIFORM_WEIGHTS = WeightProfile([1.0, 1.0, 1.0, 1.0, 1.0, 1.0])
SKEWED_WEIGHTS = WeightProfile([1.2, 1.1, 1.0, 1.0, 0.9, 0.8])

WEIGHT_PROFILES = {
    "uniform": UNIFORM_WEIGHTS,
    "skewed": SKEWED_WEIGHTS,
}


def get_weight_profile(name: str) -> WeightProfile:
    if name not in WEIGHT_PROFILES:
        raise ValueError(f"Unknown weight profile: {name}")
    return WEIGHT_PROFILES[name]
