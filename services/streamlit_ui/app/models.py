from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BackendModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# -------------------------
# Dashboard
# -------------------------

class DashboardStats(BackendModel):
    current_balance: Optional[float] = Field(default=None, alias="currentBalance")
    monthly_income: Optional[float] = Field(default=None, alias="monthlyIncome")
    monthly_expenses: Optional[float] = Field(default=None, alias="monthlyExpenses")
    income_change: Optional[float] = Field(default=None, alias="incomeChange")
    expense_change: Optional[float] = Field(default=None, alias="expenseChange")
    savings_percentage: Optional[float] = Field(default=None, alias="savingsPercentage")


class MonthlyData(BackendModel):
    month: str
    ingresos: float = 0.0
    gastos: float = 0.0


class PieData(BackendModel):
    name: str
    value: float = 0.0


class RecentTransaction(BackendModel):
    id: Union[int, str]
    description: str = ""
    amount: float = 0.0
    date: str
    type: str
    category: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.type == "ingreso"


# -------------------------
# Savings goals
# -------------------------

PRIORITIES = ("HIGH", "MEDIUM", "LOW")
STATUS_COMPLETED = "COMPLETED"


class SavingsGoal(BackendModel):
    id_goal: int = Field(..., alias="idGoal")
    name: str
    target_amount: float = Field(0.0, alias="targetAmount")
    current_amount: float = Field(0.0, alias="currentAmount")
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    priority: str = "MEDIUM"
    status: Optional[str] = None
    frequency: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED or self.current_amount >= self.target_amount

    @property
    def remaining(self) -> float:
        return max(0.0, self.target_amount - self.current_amount)


class CreateGoalRequest(BackendModel):
    name: str
    target_amount: float = Field(..., alias="targetAmount")
    end_date: str = Field(..., alias="endDate")
    priority: str
    frequency: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")


class GoalTransactionRequest(BackendModel):
    amount: float
