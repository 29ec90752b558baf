"""
Unit tests for the quiz engine, the shuffle and the session counters
"""
import random

import pytest

from core.errors import NoSelectionError, QuizActiveError
from core.types import StarRecord
from game.quiz import QuizEngine, QuizPhase, fisher_yates_shuffle
from game.stats import QuizStats, round_half_up
from tests.sample_stars import BETELGEUSE, CANOPUS, NAMED, PROCYON, RIGEL, SIRIUS


@pytest.fixture
def engine(named_stars):
    return QuizEngine(named_stars, random.Random(7))


@pytest.mark.unit
class TestShuffle:
    def test_is_permutation(self):
        items = list(range(20))
        fisher_yates_shuffle(items, random.Random(3))
        assert sorted(items) == list(range(20))

    def test_same_seed_same_order(self):
        a = fisher_yates_shuffle(list("abcdef"), random.Random(99))
        b = fisher_yates_shuffle(list("abcdef"), random.Random(99))
        assert a == b

    def test_short_lists(self):
        assert fisher_yates_shuffle([], random.Random(1)) == []
        assert fisher_yates_shuffle([5], random.Random(1)) == [5]

    def test_every_position_reachable(self):
        rng = random.Random(2024)
        firsts = {tuple(fisher_yates_shuffle([1, 2, 3], rng))[0] for _ in range(200)}
        assert firsts == {1, 2, 3}


@pytest.mark.unit
class TestNearestStars:
    def test_nearest_in_3d(self, engine):
        assert engine.nearest_stars(SIRIUS) == [PROCYON, BETELGEUSE, RIGEL]

    def test_excludes_self(self, engine):
        assert SIRIUS not in engine.nearest_stars(SIRIUS, count=10)
        assert len(engine.nearest_stars(SIRIUS, count=10)) == 4

    def test_ties_keep_catalog_order(self):
        a = SIRIUS
        b = StarRecord(id=20, proper="B", x=2.0)
        c = StarRecord(id=21, proper="C", x=0.0)   # same distance as B
        engine = QuizEngine([a, b, c])
        assert engine.nearest_stars(a, count=2) == [b, c]

    def test_single_star_pool(self):
        engine = QuizEngine([SIRIUS])
        assert engine.nearest_stars(SIRIUS) == []


@pytest.mark.unit
class TestQuestion:
    def test_option_set(self, engine):
        q = engine.start(SIRIUS)
        ids = [s.id for s in q.options]
        assert len(ids) == 4
        assert len(set(ids)) == 4
        assert ids.count(SIRIUS.id) == 1
        assert set(ids) == {SIRIUS.id, PROCYON.id, BETELGEUSE.id, RIGEL.id}
        assert CANOPUS not in q.options

    @pytest.mark.parametrize("pool_size", [1, 2, 3, 4, 5])
    def test_option_count_is_min_of_four_and_pool(self, pool_size):
        engine = QuizEngine(NAMED[:pool_size], random.Random(0))
        q = engine.start(NAMED[0])
        assert len(q.options) == min(4, pool_size)
        assert [s.id for s in q.options].count(NAMED[0].id) == 1

    def test_star_outside_pool_still_appears_once(self):
        engine = QuizEngine(NAMED[1:], random.Random(0))
        q = engine.start(SIRIUS)
        assert [s.id for s in q.options].count(SIRIUS.id) == 1
        assert len(q.options) == 4

    def test_seeded_order_is_reproducible(self, named_stars):
        a = QuizEngine(named_stars, random.Random(42)).start(SIRIUS)
        b = QuizEngine(named_stars, random.Random(42)).start(SIRIUS)
        assert a.options == b.options

    def test_start_sets_state(self, engine):
        engine.start(RIGEL)
        assert engine.phase == QuizPhase.ACTIVE
        assert engine.quiz_active
        assert engine.current_star == RIGEL
        assert engine.correct_answer == RIGEL

    def test_no_overlapping_quiz(self, engine):
        engine.start(SIRIUS)
        with pytest.raises(QuizActiveError):
            engine.start(PROCYON)
        assert engine.current_star == SIRIUS


@pytest.mark.unit
class TestAnswer:
    def test_correct_answer(self, engine):
        engine.start(SIRIUS)
        outcome = engine.submit(SIRIUS.id)
        assert outcome.is_correct
        assert outcome.message == "Correct!"
        assert (engine.stats.answered, engine.stats.correct) == (1, 1)
        assert engine.stats.success_rate == 100
        assert not engine.quiz_active
        assert engine.question is None

    def test_wrong_answer(self, engine):
        engine.start(SIRIUS)
        outcome = engine.submit(PROCYON.id)
        assert not outcome.is_correct
        assert outcome.message == "Incorrect. The correct answer was Sirius"
        assert (engine.stats.answered, engine.stats.correct) == (1, 0)
        assert engine.stats.success_rate == 0

    def test_no_selection_changes_nothing(self, engine):
        q = engine.start(SIRIUS)
        with pytest.raises(NoSelectionError):
            engine.submit(None)
        assert engine.quiz_active
        assert engine.question is q
        assert engine.stats.answered == 0

    def test_submit_without_question(self, engine):
        with pytest.raises(QuizActiveError):
            engine.submit(SIRIUS.id)

    def test_skip(self, engine):
        engine.start(SIRIUS)
        engine.skip()
        assert not engine.quiz_active
        assert engine.stats.answered == 0
        engine.start(PROCYON)   # a new question can start

    def test_reset(self, engine):
        engine.start(SIRIUS)
        engine.submit(SIRIUS.id)
        engine.start(PROCYON)
        engine.reset()
        assert not engine.quiz_active
        assert engine.current_star is None
        assert (engine.stats.answered, engine.stats.correct) == (0, 0)

    def test_session(self, engine):
        for star, pick in [(SIRIUS, SIRIUS), (PROCYON, PROCYON), (RIGEL, SIRIUS)]:
            engine.start(star)
            engine.submit(pick.id)
        assert (engine.stats.answered, engine.stats.correct) == (3, 2)
        assert engine.stats.success_rate == 67


@pytest.mark.unit
class TestStats:
    def test_zero_answered(self):
        assert QuizStats().success_rate == 0

    @pytest.mark.parametrize("correct,answered,rate", [
        (1, 1, 100), (0, 5, 0), (2, 3, 67), (1, 3, 33), (1, 8, 13), (1, 400, 0),
    ])
    def test_rate(self, correct, answered, rate):
        stats = QuizStats(answered=answered, correct=correct)
        assert stats.success_rate == rate
        assert 0 <= stats.success_rate <= 100

    def test_round_half_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4999) == 2

    def test_record_and_reset(self):
        stats = QuizStats()
        stats.record(True)
        stats.record(False)
        assert (stats.answered, stats.correct) == (2, 1)
        assert stats.summary() == "Answered: 2  Correct: 1  Rate: 50%"
        stats.reset()
        assert (stats.answered, stats.correct) == (0, 0)
