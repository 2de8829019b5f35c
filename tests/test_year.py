import pytest

from budgetplan.data_model import INVESTMENTS_ACCOUNT, Account, BudgetItem, Year


def test_next_year_increases_all_items_and_accounts():
    year1 = Year(
        [BudgetItem.recurring_expense("kids", 100), BudgetItem.recurring_income("work", 100)],
        [Account("acct", 100, 0.05)],
    )

    year2 = year1.next_year()

    assert [item.amount for item in year2.items] == pytest.approx([-103, 103])
    assert [acct.amount for acct in year2.accounts] == pytest.approx([105])


def test_extra_cash_goes_to_investment_account():
    year1 = Year(
        [BudgetItem("kids", -100, 0), BudgetItem("income", 200, 0)],
        [Account(INVESTMENTS_ACCOUNT, 0, 0)],
    )

    year2 = year1.next_year()

    assert year2.accounts[0].amount == 100


def test_investments_grow_before_the_deposit():
    year1 = Year([BudgetItem("income", 100, 0)], [Account("investments", 1000, 0.1), Account("house", 1000, 0.1)])

    year2 = year1.next_year()

    assert year2.account("investments").amount == pytest.approx(1200)
    assert year2.account("house").amount == pytest.approx(1100)


def test_deposit_uses_cash_before_item_growth_and_expiry():
    year1 = Year(
        [BudgetItem.recurring_income("income", 200), BudgetItem.one_time_expense("car", 150)],
        [Account("investments", 0, 0)],
    )

    year2 = year1.next_year()

    assert year2.account("investments").amount == pytest.approx(50)
    assert year2.extra_cash() == pytest.approx(206)


def test_extra_cash_adds_up_the_items():
    year1 = Year([BudgetItem.recurring_expense("kids", 100), BudgetItem.recurring_income("work", 100)])

    assert year1.extra_cash() == 0
    assert Year().extra_cash() == 0


def test_extra_cash_is_order_independent():
    items = [BudgetItem("a", 10, 0), BudgetItem("b", -4, 0), BudgetItem("c", 7, 0)]

    assert Year(items).extra_cash() == Year(reversed(items)).extra_cash() == 13


def test_merge_concatenates_items_and_accounts():
    year1 = Year([BudgetItem.recurring_expense("kids", 100)], [Account("acct", 100, 0)])
    year2 = Year([BudgetItem.recurring_expense("kids", 100)], [Account("acct", 100, 0)])

    merged = year1.merge(year2)

    assert len(merged.items) == 2
    assert len(merged.accounts) == 2
    assert merged.items == year1.items + year2.items


def test_merge_with_nothing_is_identity():
    year1 = Year([BudgetItem.recurring_expense("kids", 100)])

    assert year1.merge(None) is year1


def test_next_year_does_not_mutate():
    year1 = Year([BudgetItem("a", 10, 0.5)], [Account("investments", 5, 0)])

    year1.next_year()

    assert year1 == Year([BudgetItem("a", 10, 0.5)], [Account("investments", 5, 0)])


def test_active_items_skip_expired():
    year = Year([BudgetItem.one_time_income("gift", 10), BudgetItem.recurring_income("work", 10)]).next_year()

    assert [item.name for item in year.active_items()] == ["work"]


def test_to_dict_lists_items_only_by_default():
    year = Year([BudgetItem("kids", -100, 0, 1)], [Account("investments", 5, 0)])

    assert year.to_dict() == {
        "items": [{"name": "kids", "amount": -100, "rate_of_increase": 0, "duration": 1}]
    }
    assert year.to_dict(include_accounts=True)["accounts"] == [
        {"name": "investments", "amount": 5, "rate_of_increase": 0}
    ]
