import pytest
from pydantic import ValidationError

from billed.models.bill import Bill, BillForm, BillStatus


class TestBill:
    def test_defaults(self):
        bill = Bill(name="Taxi", date="2024-06-27")
        assert bill.id is None
        assert bill.email == ""
        assert bill.amount == 0
        assert bill.pct == 20
        assert bill.commentary == ""
        assert bill.file_url is None
        assert bill.file_name is None
        assert bill.status == BillStatus.PENDING
        assert bill.is_draft is True

    def test_accepts_camel_case_payload(self):
        bill = Bill.model_validate(
            {
                "id": "abc",
                "name": "Hotel",
                "date": "2024-06-27",
                "amount": "348",
                "vat": "70",
                "fileUrl": "https://example.com/test.jpg",
                "fileName": "test.jpg",
                "status": "accepted",
            }
        )
        assert bill.amount == 348
        assert bill.vat == 70
        assert bill.file_url == "https://example.com/test.jpg"
        assert bill.status == BillStatus.ACCEPTED
        assert bill.is_draft is False

    def test_payload_uses_camel_case(self):
        bill = Bill(id="abc", name="Hotel", date="2024-06-27", file_url="u", file_name="f.jpg")
        payload = bill.to_payload()
        assert payload["fileUrl"] == "u"
        assert payload["fileName"] == "f.jpg"
        assert payload["status"] == "pending"

    def test_file_reference_must_be_complete(self):
        with pytest.raises(ValidationError, match="fileUrl and fileName"):
            Bill(name="Hotel", date="2024-06-27", file_url="https://example.com/a.jpg")

    def test_rejects_negative_amount(self):
        with pytest.raises(ValidationError):
            Bill(name="Hotel", date="2024-06-27", amount=-1)

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            Bill(name="", date="2024-06-27")

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            Bill(name="Hotel", date="2024-06-27", status="archived")


class TestBillForm:
    def _fields(self, **overrides):
        fields = {
            "type": "Transports",
            "name": "Vol Paris Londres",
            "date": "2024-06-27",
            "amount": "348",
            "vat": "70",
            "pct": "20",
            "commentary": "Business trip",
        }
        fields.update(overrides)
        return fields

    def test_coerces_strings(self):
        form = BillForm.model_validate(self._fields())
        assert form.amount == 348
        assert form.vat == 70
        assert form.pct == 20

    def test_blank_pct_defaults_to_20(self):
        form = BillForm.model_validate(self._fields(pct=""))
        assert form.pct == 20

    def test_blank_vat_defaults_to_zero(self):
        form = BillForm.model_validate(self._fields(vat=" "))
        assert form.vat == 0

    def test_none_commentary(self):
        form = BillForm.model_validate(self._fields(commentary=None))
        assert form.commentary == ""

    def test_date_is_canonicalized(self):
        form = BillForm.model_validate(self._fields(date="2024/06/27"))
        assert form.date == "2024-06-27"

    def test_invalid_date(self):
        with pytest.raises(ValidationError):
            BillForm.model_validate(self._fields(date="27/06/2024x"))

    def test_pct_over_100(self):
        with pytest.raises(ValidationError):
            BillForm.model_validate(self._fields(pct="120"))

    def test_missing_name(self):
        with pytest.raises(ValidationError):
            BillForm.model_validate(self._fields(name=""))
