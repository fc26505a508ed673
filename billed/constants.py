ROUTES_PATH = {
    "Login": "/",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
    "Dashboard": "#admin/dashboard",
}

BILLS_PAGE_TITLE = "Mes notes de frais"
LOADING_MESSAGE = "Loading..."
EMPTY_BILLS_MESSAGE = "Aucune note de frais à afficher"

DEFAULT_PCT = 20
