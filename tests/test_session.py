"""Tests for the drill round state machine."""

import random

import pytest

from gto_trainer.models.action import Action
from gto_trainer.models.hand import HandClass, StrengthTier
from gto_trainer.models.position import Position
from gto_trainer.training.catalog import HandCatalog
from gto_trainer.training.session import DrillSession, RoundState


def _single_hand_session(label="72o", tier=StrengthTier.R_FOLD,
                         position=Position.UTG):
    catalog = HandCatalog([HandClass(label, tier)])
    return DrillSession(position=position, catalog=catalog)


class TestRoundFlow:

    def test_starts_idle(self):
        session = _single_hand_session()
        assert session.state == RoundState.IDLE
        assert session.current_hand is None

    def test_deal_awaits_action(self):
        session = _single_hand_session()
        hand = session.deal()
        assert hand.label == "72o"
        assert session.current_hand == hand
        assert session.state == RoundState.AWAITING_ACTION

    def test_correct_answer_returns_to_idle(self):
        session = _single_hand_session()
        session.deal()
        result = session.submit(Action.FOLD)
        assert result.is_correct
        assert session.state == RoundState.IDLE

    def test_wrong_answer_waits_for_advance(self):
        session = _single_hand_session()
        session.deal()
        result = session.submit(Action.OPEN)
        assert not result.is_correct
        assert result.correct_action == Action.FOLD
        assert session.state == RoundState.AWAITING_ADVANCE

        assert session.advance() is True
        assert session.state == RoundState.IDLE

    def test_advance_is_noop_otherwise(self):
        session = _single_hand_session()
        assert session.advance() is False
        session.deal()
        assert session.advance() is False
        assert session.state == RoundState.AWAITING_ACTION

    def test_submit_without_hand(self):
        session = _single_hand_session()
        with pytest.raises(RuntimeError):
            session.submit(Action.FOLD)

    def test_submit_twice_rejected(self):
        session = _single_hand_session()
        session.deal()
        session.submit(Action.RAISE)
        with pytest.raises(RuntimeError):
            session.submit(Action.FOLD)

    def test_deal_while_awaiting_rejected(self):
        session = _single_hand_session()
        session.deal()
        with pytest.raises(RuntimeError):
            session.deal()

    def test_change_position_redeals(self):
        session = _single_hand_session(label="AA", tier=StrengthTier.R_PURPLE)
        session.deal()
        session.submit(Action.FOLD)
        session.change_position(Position.CO)
        assert session.position == Position.CO
        assert session.state == RoundState.AWAITING_ACTION
        assert session.submit(Action.RAISE).is_correct

    def test_empty_catalog_deals_fallback(self):
        session = DrillSession(catalog=HandCatalog([]))
        assert session.deal().label == "AA"


class TestTallies:

    def test_counts_and_accuracy(self):
        session = _single_hand_session()
        assert session.accuracy == 0.0

        session.deal()
        session.submit(Action.FOLD)
        session.deal()
        session.submit(Action.CALL)
        session.advance()

        assert session.total_count == 2
        assert session.correct_count == 1
        assert session.accuracy == pytest.approx(0.5)
        assert len(session.mistakes) == 1
        assert session.mistakes[0].user_action == Action.CALL

    def test_results_by_position(self):
        session = _single_hand_session(label="AA", tier=StrengthTier.R_PURPLE)
        session.deal()
        session.submit(Action.OPEN)
        session.change_position(Position.BTN)
        session.submit(Action.OPEN)
        session.advance()

        tallies = session.results_by_position
        assert list(tallies) == [Position.UTG, Position.BTN]
        assert tallies[Position.UTG].correct == 1
        assert tallies[Position.BTN].correct == 0
        assert tallies[Position.BTN].accuracy == 0.0

    def test_default_catalog_draws(self):
        session = DrillSession(position=Position.HJ)
        session.catalog = HandCatalog(session.catalog.all_hands(), rng=random.Random(3))
        for _ in range(10):
            session.deal()
            session.submit(Action.FOLD)
            session.advance()
        assert session.total_count == 10
