"""Tests for work item ranking (deterministic scoring and time adjustment)."""

import pytest
from datetime import timedelta

from workplanner.engine.config import PlannerConfig
from workplanner.engine.ranking import adjusted_minutes, rank_work_items, urgency_score


class TestRankScore:
    """Test rank_work_items() scoring and ordering."""

    def test_scores_single_item(self, make_request, sample_item, now):
        """All scores 50, due in 5 days: 15 + 12.5 + 7.5 + 7.5 + 0.15 * 24."""
        ranked = rank_work_items(make_request([sample_item]), now)

        assert len(ranked) == 1
        assert ranked[0].item.id == sample_item.id
        assert ranked[0].days_until_due == 5
        assert ranked[0].rank_score == pytest.approx(46.1)

    def test_sorts_by_score_descending(self, make_request, make_item, now):
        """Higher-scoring items come first regardless of input order."""
        low = make_item(id="low", priority_score=10, risk_score=10)
        high = make_item(id="high", priority_score=90, risk_score=90)

        ranked = rank_work_items(make_request([low, high]), now)

        assert [r.item.id for r in ranked] == ["high", "low"]

    def test_equal_scores_keep_input_order(self, make_request, make_item, now):
        """Ties are broken by input order."""
        items = [make_item(id=f"item-{i}") for i in range(4)]

        ranked = rank_work_items(make_request(items), now)

        assert [r.item.id for r in ranked] == ["item-0", "item-1", "item-2", "item-3"]

    def test_rounds_to_two_decimals(self, make_request, make_item, now):
        """Rank score is rounded to two decimal places."""
        item = make_item(priority_score=33.333, risk_score=17.777, due_in_days=3)

        ranked = rank_work_items(make_request([item]), now)

        assert ranked[0].rank_score == round(ranked[0].rank_score, 2)

    def test_prefer_high_risk_boost(self, make_request, sample_item, now):
        """prefer_high_risk adds 0.06 x risk."""
        request = make_request([sample_item], priorities={"prefer_high_risk": True})

        ranked = rank_work_items(request, now)

        assert ranked[0].rank_score == pytest.approx(46.1 + 3.0)

    def test_prefer_high_weight_boost(self, make_request, make_item, now):
        """prefer_high_weight adds 0.06 x grade weight."""
        item = make_item(grade_weight=100)
        base = rank_work_items(make_request([item]), now)[0].rank_score

        boosted = rank_work_items(make_request([item], priorities={"prefer_high_weight": True}), now)[0]

        assert boosted.rank_score == pytest.approx(base + 6.0)

    def test_prefer_near_deadline_boost(self, make_request, make_item, now):
        """prefer_near_deadline adds 0.06 x urgency; due in 1 day means urgency 100."""
        item = make_item(due_in_days=1)
        base = rank_work_items(make_request([item]), now)[0].rank_score

        boosted = rank_work_items(make_request([item], priorities={"prefer_near_deadline": True}), now)[0]

        assert boosted.rank_score == pytest.approx(base + 6.0)

    def test_nearer_deadline_ranks_higher(self, make_request, make_item, now):
        """With equal scores, the nearer deadline wins through urgency."""
        later = make_item(id="later", due_in_days=10)
        sooner = make_item(id="sooner", due_in_days=2)

        ranked = rank_work_items(make_request([later, sooner]), now)

        assert ranked[0].item.id == "sooner"

    def test_dominating_item_never_ranks_below(self, make_request, make_item, now):
        """An item at least as good on every score and due no later never scores lower."""
        cases = [
            ({"priority_score": 60, "risk_score": 60, "complexity_score": 60, "grade_weight": 60}, 3, 3),
            ({"priority_score": 51, "risk_score": 50, "complexity_score": 50, "grade_weight": 50}, 2, 9),
            ({"priority_score": 100, "risk_score": 100, "complexity_score": 100, "grade_weight": 100}, 1, 1),
        ]
        for scores, dominant_due, other_due in cases:
            dominant = make_item(id="a", due_in_days=dominant_due, **scores)
            other = make_item(id="b", due_in_days=other_due)
            for priorities in ({}, {"prefer_high_risk": True, "prefer_high_weight": True, "prefer_near_deadline": True}):
                ranked = {r.item.id: r for r in rank_work_items(make_request([other, dominant], priorities=priorities), now)}
                assert ranked["a"].rank_score >= ranked["b"].rank_score

    def test_custom_config_weights(self, make_request, sample_item, now):
        """Weights come from the supplied PlannerConfig."""
        config = PlannerConfig(
            priority_weight=1.0,
            risk_weight=0.0,
            complexity_weight=0.0,
            grade_weight_weight=0.0,
            urgency_weight=0.0,
        )

        ranked = rank_work_items(make_request([sample_item]), now, config)

        assert ranked[0].rank_score == pytest.approx(50.0)


class TestDaysUntilDue:
    """Test due-date windows."""

    def test_partial_day_rounds_up(self, make_request, make_item, now):
        """Due in 2 days and 1 hour counts as 3 days."""
        item = make_item(due_at=(now + timedelta(days=2, hours=1)).isoformat())

        ranked = rank_work_items(make_request([item]), now)

        assert ranked[0].days_until_due == 3

    def test_overdue_clamps_to_one(self, make_request, make_item, now):
        """Items already past due have a 1-day window."""
        item = make_item(due_in_days=-3)

        ranked = rank_work_items(make_request([item]), now)

        assert ranked[0].days_until_due == 1

    def test_malformed_due_date_treated_as_due_now(self, make_request, make_item, now):
        """An unparseable due date behaves like an item due immediately."""
        item = make_item(due_at="not-a-date")

        ranked = rank_work_items(make_request([item]), now)

        assert ranked[0].days_until_due == 1
        assert ranked[0].due_instant == now

    def test_urgency_is_capped(self):
        """Urgency never exceeds 100."""
        assert urgency_score(1) == 100
        assert urgency_score(2) == 60
        assert urgency_score(120) == 1


class TestAdjustedMinutes:
    """Test adjusted_minutes() time adjustment."""

    def test_steady_initial_is_unchanged(self, make_request):
        assert adjusted_minutes(120, make_request()) == 120

    def test_pace_multipliers(self, make_request):
        """slow = 1.2, fast = 0.86."""
        assert adjusted_minutes(100, make_request(pace={"productivity_profile": "slow"})) == 120
        assert adjusted_minutes(100, make_request(pace={"productivity_profile": "fast"})) == 86

    def test_recompute_multipliers(self, make_request):
        """session_skipped = 1.1, workload_changed = 1.06."""
        assert adjusted_minutes(60, make_request(recompute={"trigger": "session_skipped"})) == 66
        assert adjusted_minutes(100, make_request(recompute={"trigger": "workload_changed"})) == 106

    def test_completion_drift(self, make_request):
        """A 25% average overrun adds 25% to the estimate."""
        assert adjusted_minutes(100, make_request(behavior={"avg_completion_drift_pct": 25})) == 125

    def test_rounds_up(self, make_request):
        """Fractional minutes round up."""
        assert adjusted_minutes(101, make_request(pace={"productivity_profile": "fast"})) == 87

    def test_minimum_twenty_minutes(self, make_request):
        """Short items are padded up to 20 minutes."""
        for estimated in (1, 5, 19):
            for profile in ("slow", "steady", "fast"):
                request = make_request(pace={"productivity_profile": profile})
                assert adjusted_minutes(estimated, request) >= 20

    def test_ranked_items_carry_adjusted_minutes(self, make_request, make_item, now):
        item = make_item(estimated_minutes=5)

        ranked = rank_work_items(make_request([item]), now)

        assert ranked[0].adjusted_minutes == 20
