"""
Tests for group expenses and the group summary side effect.
"""
import pytest

from expense_tracker.models.groups import GroupExpense
from expense_tracker.schemas.group_schema import GroupCreate, GroupExpenseCreate
from expense_tracker.services.group_service import create_group, get_group
from expense_tracker.services.group_expense_service import (
    add_group_expense, get_group_expenses, format_amount, build_last_message, JUST_ADDED
)
from expense_tracker.tests.conftest import at


@pytest.mark.unit
class TestLastMessage:
    """Test the group summary message helpers."""

    def test_whole_amount_has_no_fraction(self):
        assert format_amount(250.0) == "250"
        assert format_amount(250) == "250"

    def test_fractional_amount_kept(self):
        assert format_amount(12.5) == "12.5"

    def test_message_embeds_payer_and_amount(self):
        assert build_last_message("Asha", 250.0) == "Asha added ₹250"


@pytest.mark.unit
class TestAddGroupExpense:
    """Test add_group_expense()."""

    def test_updates_group_summary(self, db_session):
        create_group(db_session, GroupCreate(id="G", name="Flat"))

        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=250, paid_by="Asha", date=at(5)))

        db_session.expire_all()
        group = get_group(db_session, "G")
        assert "Asha" in group.last_msg
        assert "250" in group.last_msg
        assert group.time == JUST_ADDED

    def test_latest_summary_wins(self, db_session):
        create_group(db_session, GroupCreate(id="G", name="Flat"))

        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=100, paid_by="Asha"))
        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=40.5, paid_by="Ravi"))

        db_session.expire_all()
        assert get_group(db_session, "G").last_msg == "Ravi added ₹40.5"

    def test_only_matching_group_updated(self, db_session):
        create_group(db_session, GroupCreate(id="G", name="Flat"))
        create_group(db_session, GroupCreate(id="H", name="Trip", last_msg="old", time="yesterday"))

        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=10, paid_by="Asha"))

        db_session.expire_all()
        other = get_group(db_session, "H")
        assert other.last_msg == "old"
        assert other.time == "yesterday"

    def test_missing_group_still_stores_expense(self, db_session):
        expense = add_group_expense(db_session, GroupExpenseCreate(group_id="ghost", amount=75, paid_by="Asha"))

        assert expense.pk is not None
        assert db_session.query(GroupExpense).filter(GroupExpense.group_id == "ghost").count() == 1
        assert get_group(db_session, "ghost") is None


@pytest.mark.unit
class TestGetGroupExpenses:
    """Test get_group_expenses()."""

    def test_sorted_by_date_descending(self, db_session):
        for day in (2, 9, 4):
            add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=day, date=at(day)))

        expenses = get_group_expenses(db_session, "G")

        assert [e.amount for e in expenses] == [9, 4, 2]

    def test_new_latest_expense_comes_first(self, db_session):
        create_group(db_session, GroupCreate(id="G", name="Flat"))
        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=10, paid_by="Ravi", date=at(1)))

        added = add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=250, paid_by="Asha", date=at(20)))

        assert get_group_expenses(db_session, "G")[0].pk == added.pk

    def test_undated_expenses_listed_last(self, db_session):
        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=1))
        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=2, date=at(3)))

        expenses = get_group_expenses(db_session, "G")

        assert [e.amount for e in expenses] == [2, 1]

    def test_filters_by_group(self, db_session):
        add_group_expense(db_session, GroupExpenseCreate(group_id="G", amount=1, date=at(1)))
        add_group_expense(db_session, GroupExpenseCreate(group_id="H", amount=2, date=at(2)))

        assert [e.group_id for e in get_group_expenses(db_session, "G")] == ["G"]
