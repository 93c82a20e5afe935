from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from family_budget.domains.system.routes import router as system_router
from family_budget.domains.transactions.routes import router as transaction_router
from family_budget.domains.categories.routes import router as category_router
from family_budget.domains.transactions.services import BudgetManager, ExpenseManager, IncomeManager
from family_budget.domains.categories.service import CategoryService
from family_budget.config.setting import settings
import logging
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Length"],
    max_age=12 * 60 * 60,
)

@app.on_event("startup")
async def startup():
    # All ledger state lives in memory for the lifetime of the process
    app.state.budget_manager = BudgetManager()
    app.state.expense_manager = ExpenseManager()
    app.state.income_manager = IncomeManager()

    category_service = CategoryService()
    category_service.seed_defaults()
    app.state.category_service = category_service

    logger.info(f"{settings.app_name} API started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Allowed origins: {settings.parsed_origins}")

@app.on_event("shutdown")
def shutdown():
    logger.info(f"{settings.app_name} API shutting down")


app.include_router(system_router, prefix="/api", tags=["System"])
app.include_router(transaction_router, prefix="/api", tags=["Transaction"])
app.include_router(category_router, prefix="/api", tags=["Category"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.port, log_level="info")
