"""Placeholder payloads served when the analytics backend lacks an endpoint.

The payloads are fixed so dashboards render the same numbers on every call.
"""

from typing import Any

# Rows of exported CSVs are joined by this literal two-character sequence.
CSV_ROW_SEPARATOR = "\\n"


def mock_analytics(event_id: str) -> dict[str, Any]:
    return {
        "views": 1250,
        "registrations": 45,
        "viewsThisWeek": 340,
        "registrationsThisWeek": 12,
        "conversionRate": 3.6,
        "revenue": 2250,
        "averageRating": 4.6,
        "totalReviews": 23,
        "pageViews": [
            {"date": "2024-09-23", "views": 45},
            {"date": "2024-09-24", "views": 67},
            {"date": "2024-09-25", "views": 89},
            {"date": "2024-09-26", "views": 123},
            {"date": "2024-09-27", "views": 156},
            {"date": "2024-09-28", "views": 134},
            {"date": "2024-09-29", "views": 201},
        ],
        "registrationData": [
            {"date": "2024-09-23", "registrations": 3},
            {"date": "2024-09-24", "registrations": 5},
            {"date": "2024-09-25", "registrations": 8},
            {"date": "2024-09-26", "registrations": 12},
            {"date": "2024-09-27", "registrations": 15},
            {"date": "2024-09-28", "registrations": 18},
            {"date": "2024-09-29", "registrations": 22},
        ],
        "ticketSales": [
            {"ticketType": "General", "sold": 25, "revenue": 1250},
            {"ticketType": "VIP", "sold": 15, "revenue": 750},
            {"ticketType": "Student", "sold": 5, "revenue": 250},
        ],
        "recentActivity": [
            {
                "type": "registration",
                "user": "John Doe",
                "timestamp": "2024-09-29T10:30:00Z",
                "details": "VIP Ticket",
            },
            {"type": "view", "user": "Anonymous", "timestamp": "2024-09-29T10:25:00Z"},
            {
                "type": "registration",
                "user": "Jane Smith",
                "timestamp": "2024-09-29T09:15:00Z",
                "details": "General Ticket",
            },
        ],
    }


def mock_registrations(event_id: str) -> list[dict[str, Any]]:
    return [
        {
            "id": "reg-001",
            "name": "John Doe",
            "email": "john.doe@email.com",
            "phone": "+1 (555) 123-4567",
            "registrationDate": "2024-09-25T14:30:00Z",
            "ticketType": "VIP",
            "quantity": 1,
            "totalAmount": 75,
            "paymentMethod": "bank_transfer",
            "paymentStatus": "completed",
            "checkInStatus": False,
        },
        {
            "id": "reg-002",
            "name": "Jane Smith",
            "email": "jane.smith@email.com",
            "phone": "+1 (555) 987-6543",
            "registrationDate": "2024-09-26T09:15:00Z",
            "ticketType": "General",
            "quantity": 2,
            "totalAmount": 50,
            "paymentMethod": "cash_app",
            "paymentStatus": "completed",
            "checkInStatus": True,
            "checkInTime": "2024-09-29T08:00:00Z",
        },
        {
            "id": "reg-003",
            "name": "Bob Johnson",
            "email": "bob.johnson@email.com",
            "registrationDate": "2024-09-27T16:45:00Z",
            "ticketType": "Student",
            "quantity": 1,
            "totalAmount": 15,
            "paymentMethod": "bank_transfer",
            "paymentStatus": "pending",
            "checkInStatus": False,
        },
        {
            "id": "reg-004",
            "name": "Sarah Wilson",
            "email": "sarah.wilson@email.com",
            "phone": "+1 (555) 456-7890",
            "registrationDate": "2024-09-28T11:20:00Z",
            "ticketType": "General",
            "quantity": 1,
            "totalAmount": 25,
            "paymentMethod": "cash_app",
            "paymentStatus": "completed",
            "checkInStatus": False,
        },
    ]


def mock_financials(event_id: str) -> dict[str, Any]:
    return {
        "totalRevenue": 2250,
        "pendingPayments": 15,
        "refundedAmount": 0,
        "ticketsSold": 45,
        "ticketsRemaining": 55,
        "conversionRate": 3.6,
        "averageTicketPrice": 50,
        "revenueByTicketType": [
            {"ticketType": "General", "revenue": 1250, "ticketsSold": 25},
            {"ticketType": "VIP", "revenue": 750, "ticketsSold": 15},
            {"ticketType": "Student", "revenue": 250, "ticketsSold": 5},
        ],
    }


def _csv_bool(value: bool) -> str:
    return "true" if value else "false"


def mock_csv(event_id: str, kind: str) -> bytes:
    """Build the export CSV from the mock registration or analytics payloads."""
    if kind == "registrations":
        lines = [
            "ID,Name,Email,Phone,Registration Date,Ticket Type,Quantity,Total Amount,"
            "Payment Method,Payment Status,Check-in Status,Check-in Time"
        ]
        for reg in mock_registrations(event_id):
            lines.append(
                ",".join(
                    str(value)
                    for value in (
                        reg["id"],
                        reg["name"],
                        reg["email"],
                        reg.get("phone") or "N/A",
                        reg["registrationDate"],
                        reg["ticketType"],
                        reg["quantity"],
                        reg["totalAmount"],
                        reg["paymentMethod"],
                        reg["paymentStatus"],
                        _csv_bool(reg["checkInStatus"]),
                        reg.get("checkInTime") or "N/A",
                    )
                )
            )
    else:
        analytics = mock_analytics(event_id)
        registrations = analytics["registrationData"]
        lines = ["Date,Views,Registrations"]
        for index, view in enumerate(analytics["pageViews"]):
            count = registrations[index]["registrations"] if index < len(registrations) else 0
            lines.append(f"{view['date']},{view['views']},{count}")
    return CSV_ROW_SEPARATOR.join(lines).encode("utf-8")
