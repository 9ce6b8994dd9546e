"""Demo tax documents and issuer record in the backend's wire format."""

DEMO_ISSUER = {
    "id": 1,
    "name": "Orion Hardware Ltd.",
    "israelTaxId": "514789632",
    "address": "12 Habarzel St., Tel Aviv",
    "currency": "ILS",
    "phone": "03-7654321",
    "email": "billing@orion-hw.co.il",
    "website": "www.orion-hw.co.il",
    "createdAt": "2024-01-02T08:00:00Z",
    "updatedAt": "2025-06-30T16:45:12.1234567Z",
}


def _line(number, description, sku, quantity, unit_price, vat_rate=17):
    subtotal = round(quantity * unit_price, 2)
    vat = round(subtotal * vat_rate / 100, 2)
    return {
        "lineNumber": number,
        "description": description,
        "itemSku": sku,
        "quantity": quantity,
        "unitPrice": unit_price,
        "discountPercent": 0,
        "vatRate": vat_rate,
        "lineVatAmount": vat,
        "lineTotalAmount": round(subtotal + vat, 2),
    }


def _document(doc_id, number, day, customer_id, customer, status, payment, lines):
    subtotal = round(sum(line["quantity"] * line["unitPrice"] for line in lines), 2)
    vat = round(sum(line["lineVatAmount"] for line in lines), 2)
    return {
        "id": doc_id,
        "documentNumber": number,
        "documentDate": f"{day}T10:30:00",
        "customerId": customer_id,
        "customerName": customer,
        "customerAddress": f"{customer} HQ",
        "status": status,
        "paymentMethod": payment,
        "subTotal": subtotal,
        "vatAmount": vat,
        "totalAmount": round(subtotal + vat, 2),
        "currency": "ILS",
        "createdAt": f"{day}T10:31:07.5120000",
        "updatedAt": f"{day}T10:31:07.5120000",
        "lines": lines,
    }


DEMO_DOCUMENTS = [
    _document(1, "TIR-1001", "2025-07-01", 7, "Dana Levi Studio", 1, "Credit card", [
        _line(1, "USB-C docking station", "DOCK-220", 1, 450.0),
        _line(2, "HDMI cable 2m", "CBL-HD2", 3, 35.0),
    ]),
    _document(2, "TIR-1002", "2025-07-03", 9, "Negev Logistics", 1, "Bank transfer", [
        _line(1, "27\" monitor", "MON-27Q", 4, 1190.0),
    ]),
    _document(3, "TIR-1003", "2025-07-04", 7, "Dana Levi Studio", 2, "Cash", [
        _line(1, "Wireless keyboard", "KB-WL1", 2, 189.0),
    ]),
    _document(4, "TIR-1004", "2025-07-08", 12, "Carmel Dental", 1, "Cheque", [
        _line(1, "Laser printer", "PRN-L40", 1, 1390.0),
        _line(2, "Toner cartridge", "TNR-L40", 2, 310.0),
    ]),
    _document(5, "TIR-1005", "2025-07-10", 9, "Negev Logistics", 1, "Digital", [
        _line(1, "Network switch 24p", "SW-24G", 1, 980.0),
    ]),
    _document(6, "TIR-1006", "2025-07-12", 15, "Galil Bakery", 1, "Cash", [
        _line(1, "Receipt printer paper", "PPR-80", 10, 12.5),
    ]),
]
