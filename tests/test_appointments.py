from sqlmodel import Session, select

from ayurveda_store.models.appointment import Appointment
from ayurveda_store.models.contact_message import ContactMessage

BOOKING = {
    "name": "Lakshmi Iyer",
    "email": "lakshmi@gmail.com",
    "phone": "9000012345",
    "service": "Panchakarma Consultation",
    "date": "2026-10-21",
    "time": "10:30",
    "message": "First visit",
}


def test_book_appointment(client, engine):
    res = client.post("/api/appointments", json=BOOKING)

    assert res.status_code == 201
    assert res.json()["success"] is True

    with Session(engine) as s:
        appointment = s.get(Appointment, res.json()["id"])
        assert appointment.status == "pending"
        assert appointment.service == "Panchakarma Consultation"


def test_taken_slot_is_rejected(client, engine):
    client.post("/api/appointments", json=BOOKING)

    res = client.post("/api/appointments", json={**BOOKING, "email": "ravi@gmail.com"})

    assert res.status_code == 409
    assert res.json() == {
        "error": "This time slot is already booked. Please choose another time."
    }
    with Session(engine) as s:
        assert len(s.exec(select(Appointment)).all()) == 1


def test_other_time_same_day_is_free(client):
    client.post("/api/appointments", json=BOOKING)
    res = client.post("/api/appointments", json={**BOOKING, "time": "11:30"})
    assert res.status_code == 201


def test_cancelled_slot_can_be_rebooked(client, engine):
    with Session(engine) as s:
        s.add(Appointment(**{**BOOKING, "status": "cancelled"}))
        s.commit()

    res = client.post("/api/appointments", json=BOOKING)

    assert res.status_code == 201


def test_confirmed_slot_blocks(client, engine):
    with Session(engine) as s:
        s.add(Appointment(**{**BOOKING, "status": "confirmed"}))
        s.commit()

    res = client.post("/api/appointments", json=BOOKING)

    assert res.status_code == 409


def test_missing_field(client):
    body = {k: v for k, v in BOOKING.items() if k != "service"}
    res = client.post("/api/appointments", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "All required fields must be provided"}


def test_invalid_email_is_400(client):
    res = client.post("/api/appointments", json={**BOOKING, "email": "not-an-email"})
    assert res.status_code == 400


def test_admin_lists_appointments(client, admin_headers):
    client.post("/api/appointments", json=BOOKING)

    assert client.get("/api/appointments").status_code == 401

    res = client.get("/api/appointments", headers=admin_headers)
    assert res.status_code == 200
    assert [a["name"] for a in res.json()["appointments"]] == ["Lakshmi Iyer"]


# ---------------------------------------------------------
# CONTACT
# ---------------------------------------------------------

MESSAGE = {
    "name": "Ravi Kumar",
    "email": "ravi@gmail.com",
    "phone": "9123456780",
    "subject": "Diet plan",
    "message": "Do you offer follow-up consultations online?",
}


def test_contact_message_is_stored_unread(client, engine):
    res = client.post("/api/contact", json=MESSAGE)

    assert res.status_code == 201
    with Session(engine) as s:
        message = s.get(ContactMessage, res.json()["id"])
        assert message.read is False
        assert message.subject == "Diet plan"


def test_contact_requires_every_field(client):
    res = client.post("/api/contact", json={**MESSAGE, "subject": ""})
    assert res.status_code == 400
    assert res.json() == {"error": "All fields are required"}


def test_admin_lists_messages(client, admin_headers):
    client.post("/api/contact", json=MESSAGE)

    assert client.get("/api/contact").status_code == 401

    res = client.get("/api/contact", headers=admin_headers)
    assert [m["email"] for m in res.json()["messages"]] == ["ravi@gmail.com"]
