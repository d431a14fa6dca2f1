"""Personal-finance tracking core: budgets, invoices and cash flow."""
