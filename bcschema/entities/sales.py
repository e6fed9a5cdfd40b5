"""Sales order documents of the Business Central v2.0 API.

Matches what the metadata builder produces for ``salesOrder`` and
``salesOrderLine``: ``id`` is the only non-nullable property, everything else
may be absent or null. Enum-typed properties (``status``, ``lineType``) are
not part of the tables.
"""

from __future__ import annotations

from bcschema.schemas.fields import (
    boolean,
    date,
    date_time,
    guid,
    integer,
    number,
    ref_many,
    ref_one,
    string,
)
from bcschema.schemas.record import RecordSchema
from bcschema.schemas.registry import SchemaRegistry

_opt = {"optional": True, "nullable": True}


SALES_ORDER = RecordSchema(
    name="SalesOrder",
    fields=(
        guid("id"),
        string("number", **_opt),
        string("externalDocumentNumber", **_opt),
        date("orderDate", **_opt),
        date("postingDate", **_opt),
        guid("customerId", **_opt),
        string("customerNumber", **_opt),
        string("customerName", **_opt),
        string("billToName", **_opt),
        guid("billToCustomerId", **_opt),
        string("billToCustomerNumber", **_opt),
        string("shipToName", **_opt),
        string("shipToContact", **_opt),
        string("sellToAddressLine1", **_opt),
        string("sellToAddressLine2", **_opt),
        string("sellToCity", **_opt),
        string("sellToCountry", **_opt),
        string("sellToState", **_opt),
        string("sellToPostCode", **_opt),
        string("billToAddressLine1", **_opt),
        string("billToAddressLine2", **_opt),
        string("billToCity", **_opt),
        string("billToCountry", **_opt),
        string("billToState", **_opt),
        string("billToPostCode", **_opt),
        string("shipToAddressLine1", **_opt),
        string("shipToAddressLine2", **_opt),
        string("shipToCity", **_opt),
        string("shipToCountry", **_opt),
        string("shipToState", **_opt),
        string("shipToPostCode", **_opt),
        string("shortcutDimension1Code", **_opt),
        string("shortcutDimension2Code", **_opt),
        guid("currencyId", **_opt),
        string("currencyCode", **_opt),
        boolean("pricesIncludeTax", **_opt),
        guid("paymentTermsId", **_opt),
        guid("shipmentMethodId", **_opt),
        string("salesperson", **_opt),
        boolean("partialShipping", **_opt),
        date("requestedDeliveryDate", **_opt),
        number("discountAmount", **_opt),
        boolean("discountAppliedBeforeTax", **_opt),
        number("totalAmountExcludingTax", **_opt),
        number("totalTaxAmount", **_opt),
        number("totalAmountIncludingTax", **_opt),
        boolean("fullyShipped", **_opt),
        date_time("lastModifiedDateTime", **_opt),
        string("phoneNumber", **_opt),
        string("email", **_opt),
        ref_one("customer"),
        ref_many("salesOrderLines"),
    ),
)

SALES_ORDER_LINE = RecordSchema(
    name="SalesOrderLine",
    fields=(
        guid("id"),
        guid("documentId", **_opt),
        integer("sequence", **_opt),
        guid("itemId", **_opt),
        guid("accountId", **_opt),
        string("lineObjectNumber", **_opt),
        string("description", **_opt),
        string("description2", **_opt),
        guid("unitOfMeasureId", **_opt),
        string("unitOfMeasureCode", **_opt),
        number("quantity", **_opt),
        number("unitPrice", **_opt),
        number("discountAmount", **_opt),
        number("discountPercent", **_opt),
        boolean("discountAppliedBeforeTax", **_opt),
        number("amountExcludingTax", **_opt),
        string("taxCode", **_opt),
        number("taxPercent", **_opt),
        number("totalTaxAmount", **_opt),
        number("amountIncludingTax", **_opt),
        number("invoiceDiscountAllocation", **_opt),
        number("netAmount", **_opt),
        number("netTaxAmount", **_opt),
        number("netAmountIncludingTax", **_opt),
        date("shipmentDate", **_opt),
        number("shippedQuantity", **_opt),
        number("invoicedQuantity", **_opt),
        number("invoiceQuantity", **_opt),
        number("shipQuantity", **_opt),
        guid("itemVariantId", **_opt),
        guid("locationId", **_opt),
        ref_one("salesOrder"),
        ref_one("item"),
    ),
)

# Order with its lines expanded inline ($expand=salesOrderLines).
SALES_ORDER_WITH_LINES = SALES_ORDER.extend(
    "SalesOrderWithLines",
    ref_many("salesOrderLinesDetailed", SALES_ORDER_LINE),
)


def declared_registry() -> SchemaRegistry:
    return SchemaRegistry([SALES_ORDER, SALES_ORDER_LINE, SALES_ORDER_WITH_LINES])
