from fastapi import APIRouter, Request, Depends, HTTPException
import logging
from family_budget.domains.transactions.models import AmountInput, Transaction
from family_budget.domains.transactions.services import BudgetManager, ExpenseManager, IncomeManager
from family_budget.domains.transactions.validation import ValidationResult, validate_form, validate_transaction_form
from family_budget.shared.money import MoneyRangeError, format_money_for_display

logger = logging.getLogger(__name__)

router = APIRouter()


def get_budget_manager(request: Request) -> BudgetManager:
    return request.app.state.budget_manager


def get_expense_manager(request: Request) -> ExpenseManager:
    return request.app.state.expense_manager


def get_income_manager(request: Request) -> IncomeManager:
    return request.app.state.income_manager


def serialize_transaction(transaction: Transaction) -> dict:
    data = transaction.model_dump()
    data["formatted_amount"] = format_money_for_display(transaction.amount)
    return data


def serialize_history(transactions, total: int) -> dict:
    return {
        "transactions": [serialize_transaction(t) for t in transactions],
        "count": len(transactions),
        "total": total,
        "formatted_total": format_money_for_display(total),
    }


async def read_validated(request: Request, validate):
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=422, detail={"errors": {"form": "Request body must be valid JSON"}})

    result = validate(payload)
    if not result.ok:
        logger.info(f"Rejected input: {result.errors}")
        raise HTTPException(status_code=422, detail={"errors": result.errors})
    return result.data


@router.post("/expenses", status_code=201)
async def add_expense(request: Request, manager: BudgetManager = Depends(get_budget_manager)):
    form = await read_validated(request, validate_transaction_form)
    expense = manager.add_expense(form.amount, form.effective_date())
    return {"expense": serialize_transaction(expense), "balance": manager.balance}


@router.post("/incomes", status_code=201)
async def add_income(request: Request, manager: BudgetManager = Depends(get_budget_manager)):
    form = await read_validated(request, validate_transaction_form)
    income = manager.add_income(form.amount, form.effective_date())
    return {"income": serialize_transaction(income), "balance": manager.balance}


@router.get("/expenses")
async def get_expenses(manager: BudgetManager = Depends(get_budget_manager)):
    try:
        return serialize_history(manager.expenses, manager.total_expense)
    except MoneyRangeError as e:
        logger.error(f"Error formatting expense history: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get("/incomes")
async def get_incomes(manager: BudgetManager = Depends(get_budget_manager)):
    try:
        return serialize_history(manager.incomes, manager.total_income)
    except MoneyRangeError as e:
        logger.error(f"Error formatting income history: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get("/summary")
async def get_summary(manager: BudgetManager = Depends(get_budget_manager)):
    try:
        return {
            "summary": {
                "balance": manager.balance,
                "total_income": manager.total_income,
                "total_expense": manager.total_expense,
                "formatted": {
                    "balance": format_money_for_display(manager.balance),
                    "total_income": format_money_for_display(manager.total_income),
                    "total_expense": format_money_for_display(manager.total_expense),
                },
            }
        }
    except MoneyRangeError as e:
        logger.error(f"Error formatting summary: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


# Quick entry: amount only, recorded at the current time against a running balance

def validate_amount_input(payload) -> ValidationResult:
    return validate_form(AmountInput, payload)


def serialize_manager(manager) -> dict:
    data = serialize_history(manager.transactions, manager.total)
    data["balance"] = manager.balance
    data["formatted_balance"] = format_money_for_display(manager.balance)
    return data


@router.post("/quick-entry/expenses", status_code=201)
async def quick_add_expense(request: Request, manager: ExpenseManager = Depends(get_expense_manager)):
    data = await read_validated(request, validate_amount_input)
    expense = manager.add(data.amount)
    return {"expense": serialize_transaction(expense), "balance": manager.balance}


@router.post("/quick-entry/incomes", status_code=201)
async def quick_add_income(request: Request, manager: IncomeManager = Depends(get_income_manager)):
    data = await read_validated(request, validate_amount_input)
    income = manager.add(data.amount)
    return {"income": serialize_transaction(income), "balance": manager.balance}


@router.get("/quick-entry")
async def get_quick_entry(
    expenses: ExpenseManager = Depends(get_expense_manager),
    incomes: IncomeManager = Depends(get_income_manager),
):
    try:
        return {"expenses": serialize_manager(expenses), "incomes": serialize_manager(incomes)}
    except MoneyRangeError as e:
        logger.error(f"Error formatting quick entry ledger: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
