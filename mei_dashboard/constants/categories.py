from enum import Enum

class CategoryGroup(str, Enum):
    income = "income"
    expense = "expense"
    recurring = "recurring"

INCOME_CATEGORIES = (
    "Venda de Produtos",
    "Prestação de Serviços",
    "Rendimento de Aplicação",
    "Outros",
)

EXPENSE_CATEGORIES = (
    "Aluguel",
    "Energia",
    "Água",
    "Internet",
    "Telefone",
    "Material de Escritório",
    "Material de Venda",
    "Marketing",
    "Assinaturas",
    "Impostos",
    "Transporte",
    "Alimentação",
    "Manutenção",
    "Equipamentos",
    "Outros",
)

RECURRING_CATEGORIES = (
    "Assinatura",
    "Aluguel",
    "Serviço Mensal",
    "Financiamento",
    "Outros",
)

CATEGORIES_BY_GROUP = {
    CategoryGroup.income: INCOME_CATEGORIES,
    CategoryGroup.expense: EXPENSE_CATEGORIES,
    CategoryGroup.recurring: RECURRING_CATEGORIES,
}
