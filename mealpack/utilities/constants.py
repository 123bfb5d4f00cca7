from typing import Final

# Pack decomposition alphabet
PACK_SIZE_A: Final[int] = 5
PACK_SIZE_B: Final[int] = 7
# Upper bound (above the target) scanned when overage is allowed
OVERAGE_SEARCH_LIMIT: Final[int] = 200

TRAY_PACKING_METHOD: Final[str] = "חמגשיות"
NO_VALUE_LABEL: Final[str] = "ללא ערך"

# Spreadsheet headers for every field of an order line
COLUMNS: Final[dict[str, str]] = {
    "order_number": "הזמנה",
    "order_date": "תאריך",
    "customer_number": "מס. לקוח",
    "customer_name": "שם לקוח",
    "phone": "מספר טלפון",
    "customer_type": "פרמטר 1 ללקוח",
    "kashrut": "פרמטר 2 ללקוח",
    "order_type": "סוג",
    "city": "עיר",
    "branch": "סניף",
    "sku": 'מק"ט',
    "product_description": "תאור מוצר",
    "category": "פרמטר 1 לקוד",
    "department": "פרמטר 6 למוצר",
    "quantity": "כמות מוצר",
    "units_per_pack": "פרמטר 8 למוצר",
    "packing_method": "שיטת אירוז",
    "container_count": "כמות מיכלים",
    "container_code": "קוד מיכל",
    "meals_per_line": "מספר מנות לשורה",
    "total_meals": "מספר מנות כללי",
    "allergenic_meals": "מספר מנות אלרגניות",
    "vegetarian_meals": "מספר מנות צמחוניות",
}

# Headers written for the derived fields on export
DERIVED_COLUMNS: Final[dict[str, str]] = {
    "target_meals": "מנות לתכנון",
    "target_meals_floor": "מנות לתכנון מעוגל",
    "packs_a": f"אריזות {PACK_SIZE_A}",
    "packs_b": f"אריזות {PACK_SIZE_B}",
    "total_packs": 'סה"כ אריזות',
    "overage": "עודף/פחת",
    "status": "סטטוס אופטימיזציה",
    "container_count": "כמות מיכלים מחושב",
    "container_type": "סוג מיכל",
    "packing_method": "שיטת אירוז מחושב",
}

# Report grouping selector -> OrderLine attribute
GROUP_BY_FIELDS: Final[dict[str, str]] = {
    "sku": "sku",
    "product": "product_description",
    "category": "category",
    "department": "department",
    "branch": "branch",
}
DEFAULT_GROUP_BY: Final[str] = "sku"

# Row filters -> OrderLine attribute
FILTER_FIELDS: Final[dict[str, str]] = {
    "branch": "branch",
    "city": "city",
    "customer_type": "customer_type",
    "category": "category",
}

REPORT_PRODUCTION: Final[str] = "production"
REPORT_PACKING: Final[str] = "packing"

EXPORT_SHEET_NAME: Final[str] = "הזמנות"
EXPORT_FILE_PREFIX: Final[str] = "הזמנות"
