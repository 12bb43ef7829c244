def make_seat_document(sold: int, other: int = 0) -> dict:
    seats = [[f"S{i}", "Parkett", 2500, "SOLD"] for i in range(sold)]
    seats += [[f"F{i}", "Parkett", 2500, "FREE"] for i in range(other)]
    return {"eventId": "event", "seats": seats}
