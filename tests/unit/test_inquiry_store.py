"""Tests for lead-capture inquiries."""


async def test_create_inquiry(inquiries):
    ok = await inquiries.create_inquiry({
        "name": "Sam Lee",
        "email": "sam@example.com",
        "phone": "  ",
        "location": "Pune",
        "message": "",
    })

    assert ok
    [inquiry] = inquiries.list_inquiries()
    assert inquiry.name == "Sam Lee"
    assert inquiry.location == "Pune"
    assert inquiry.phone is None
    assert inquiry.message is None
    assert inquiry.created_at is not None


async def test_name_and_email_required(inquiries, store_client):
    assert not await inquiries.create_inquiry({"name": "", "email": "sam@example.com"})
    assert not await inquiries.create_inquiry({"name": "Sam", "email": "not-an-email"})
    assert inquiries.error == "Please enter your name and a valid email address."
    assert await store_client.select("user_inquiries") == []
