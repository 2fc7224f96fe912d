"""
Prompts and function schemas for document extraction.
"""

ESTIMATE_FUNCTION_NAME = "extract_estimate_totals"

ESTIMATE_SYSTEM_PROMPT = """You are an estimate document parser for construction and roofing projects. Your job is to find and extract the TOTAL costs for five specific categories from estimate documents.

Extract the following totals:
1. **Contract Price / Grand Total** - Look for: "Grand Total", "Total Price", "Contract Price", "Estimate Total", "Project Total", "Total Cost", "Amount Due", or the final total amount of the entire estimate
2. **Labor Total** - Look for: "Total Labor", "Labor Cost", "Labor Subtotal", "Crew Cost", "Installation Labor", "Workmanship", or similar labor-related totals
3. **Materials Total** - Look for: "Total Materials", "Materials Cost", "Material Subtotal", "Supplies", "Product Cost", or similar materials-related totals
4. **Overhead Total** - Look for: "Overhead", "Other Costs", "Miscellaneous", "Admin Costs", "Contingency", or similar overhead/misc totals (NOT profit - overhead is separate)
5. **Profit Total** - Look for: "Profit", "Company Profit", "Net Profit", "Markup", "Margin", "Contractor's Profit", "Builder's Profit", or similar profit/markup amounts

IMPORTANT RULES:
- Look for TOTALS, not individual line items
- The contract_price should be the GRAND TOTAL of the entire estimate (the final amount the customer pays)
- If you find multiple labor sections, sum them up for the total
- If you can't find a specific category, return 0 for that category
- Return dollar amounts as plain numbers (no $ signs or commas)
- If a value shows as negative, return 0
- If overhead and profit are combined (like "Profit & Overhead: $10,000"), try to split them or put the full value in profit
- Profit and overhead are SEPARATE categories - don't combine them"""

ESTIMATE_USER_PROMPT = (
    "Parse this estimate document and extract the Contract Price (grand total), Labor, "
    "Materials, Overhead, and Company Profit costs:\n\n{text}"
)

ESTIMATE_FUNCTION_DESCRIPTION = (
    "Extract the total costs for contract price, labor, materials, overhead, "
    "and profit from an estimate document"
)


def _dollars(description: str) -> dict:
    return {
        "type": "number",
        "description": f"{description} in dollars (number only, no currency symbol)",
    }


ESTIMATE_PARAMETERS = {
    "type": "object",
    "properties": {
        "contract_price": _dollars("The grand total / contract price / estimate total"),
        "labor_total": _dollars("Total labor cost"),
        "materials_total": _dollars("Total materials cost"),
        "overhead_total": _dollars("Total overhead/other costs"),
        "profit_total": _dollars("Total company profit/markup"),
    },
    "required": [
        "contract_price",
        "labor_total",
        "materials_total",
        "overhead_total",
        "profit_total",
    ],
    "additionalProperties": False,
}

PURCHASE_ORDER_FUNCTION_NAME = "extract_materials"

PURCHASE_ORDER_SYSTEM_PROMPT = """You are a material order parser for roofing/construction projects. Extract all material items from the provided text.

The document is organized by sections/categories (like "Low Slope Materials", "Standing Seam Materials", "General Materials", etc.).

For each material item, extract:
- category: The section header this item belongs to
- item_name: Description of the material (e.g., "GTA torch applied Granulated cap sheet")
- quantity: The numeric quantity (e.g., 8 from "8 roll")
- unit: The unit type (Roll, Piece, Section, EA, Box, Bag, Sqr, Each, Bundle, etc.)
- measurement: The measurement info if present (e.g., "6.0 Sq", "136.0 Ft")
- unit_cost: 0 (material orders typically don't include pricing)
- total: 0 (will be calculated later)

IMPORTANT RULES:
- Group items under their section headers
- Parse quantity and unit separately (e.g., "14 10' Section" → qty: 14, unit: "10' Section")
- If a line looks like a header (no qty/unit, bold formatting, all caps), treat it as a category name
- Ignore image references, totals, page numbers, and non-material rows
- Clean up descriptions to be readable
- If no clear category is found, use "General Materials"
- Parse the quantity as a number, not a string"""

PURCHASE_ORDER_USER_PROMPT = (
    "Extract all material items from this material order PDF text:\n\n{text}\n\n"
    "Return the items as a JSON array."
)

PURCHASE_ORDER_FUNCTION_DESCRIPTION = "Extract material items from the PDF text"

PURCHASE_ORDER_PARAMETERS = {
    "type": "object",
    "properties": {
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "category": {"type": "string", "description": "Section/category name"},
                    "item_name": {"type": "string", "description": "Material description"},
                    "quantity": {"type": "number", "description": "Numeric quantity"},
                    "unit": {"type": "string", "description": "Unit type (Roll, Box, EA, etc.)"},
                    "measurement": {
                        "type": "string",
                        "description": "Measurement info if present",
                    },
                    "unit_cost": {"type": "number", "description": "Unit cost (default 0)"},
                    "total": {"type": "number", "description": "Total cost (default 0)"},
                },
                "required": ["category", "item_name", "quantity", "unit"],
            },
        },
    },
    "required": ["items"],
}
