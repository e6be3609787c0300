"""
Statically enumerated document labels.

Every label emitted by a template is declared here so that a missing
translation surfaces as a programming error at render time.
"""

from doctemplates.app.i18n.translated_string import TranslatedString


def _label(english: str, dutch: str) -> TranslatedString:
    return TranslatedString(english=english, dutch=dutch)


AND = _label("and", "en")

# ---------------------------------------------------------------------------
# Signature page
# ---------------------------------------------------------------------------

SIGNATURES = _label("Signatures", "Ondertekening")
SIGNED_AT = _label("Signed at", "Getekend te")
SIGNED_ON = _label("Signed on", "Getekend op")
ON_BEHALF_OF = _label("On behalf of", "Namens")
IN_CAPACITY_OF = _label("In capacity of", "In hoedanigheid van")
REPRESENTED_BY = _label("Represented by", "Vertegenwoordigd door")
CAPACITY = _label("Capacity", "Hoedanigheid")
DIGITAL_SIGNATURE = _label("Digital Signature", "Digitale handtekening")

DATE = _label("date", "datum")
LOCATION = _label("location", "locatie")
TITLE = _label("title", "titel")
POSITION = _label("position", "functie")
REGISTRATION_NUMBER = _label("registration number", "KvK-nummer")
DATE_OF_BIRTH = _label("date of birth", "geboortedatum")
ROLE = _label("role", "rol")
BUSINESS_ADDRESS = _label("business address", "vestigingsadres")

# Representative capacities
DIRECTOR = _label("Director", "Bestuurder")
ATTORNEY = _label("Attorney", "Gemachtigde")
AGENT = _label("Agent", "Agent")

# Standard signatory roles
SELLER = _label("Seller", "Verkoper")
BUYER = _label("Buyer", "Koper")
LESSOR = _label("Lessor", "Verhuurder")
LESSEE = _label("Lessee", "Huurder")
CONTRACTOR = _label("Contractor", "Aannemer")
CLIENT = _label("Client", "Opdrachtgever")
FIRST_PARTY = _label("Party 1", "Partij 1")
SECOND_PARTY = _label("Party 2", "Partij 2")

# ---------------------------------------------------------------------------
# Letter
# ---------------------------------------------------------------------------

PHONE = _label("phone", "tel")
EMAIL = _label("email", "email")
WEBSITE = _label("website", "website")
KVK = _label("kvk", "kvk")
BTW = _label("vat", "btw")
IBAN = _label("iban", "iban")
ON_BEHALF_OF_KEY = _label("on behalf of", "namens")
PER_EMAIL = _label("Sent via email", "Verzonden per email")
REFERENCE_NUMBER = _label("Reference", "Referentienummer")
SALUTATION = _label("Dear sir/madam,", "Geachte heer/mevrouw,")
SUBJECT = _label("subject", "betreft")

# ---------------------------------------------------------------------------
# Invoice
# ---------------------------------------------------------------------------

INVOICE = _label("invoice", "factuur")
INVOICE_NUMBER = _label("invoice number", "factuurnummer")
INVOICE_DATE = _label("invoice date", "factuurdatum")
EXPIRY_DATE = _label("expiry date", "vervaldatum")
CLIENT_NUMBER = _label("client id", "cliëntnummer")
PURCHASE_ORDER_NUMBER = _label("purchase order number", "inkoopordernummer")
TOTAL_AMOUNT = _label("total amount", "totaalbedrag")
DESCRIPTION = _label("description", "omschrijving")
QUANTITY = _label("quantity", "aantal")
UNIT = _label("unit", "eenheid")
RATE = _label("rate", "tarief")
VAT_PERCENTAGE = _label("vat%", "btw%")
VAT = _label("vat", "btw")
AMOUNT_EXCLUDING_VAT = _label("Amount excl. VAT", "Bedrag excl. BTW")
HOUR = _label("hour", "uur")
HOURS = _label("hours", "uren")
PLEASE_TRANSFER = _label(
    "Please transfer the total amount of",
    "Wij verzoeken u vriendelijk het totaalbedrag van",
)
BY = _label("by", "uiterlijk")
TO = _label("to", "over te maken naar")
REFERENCING = _label("referencing", "onder vermelding van")

# ---------------------------------------------------------------------------
# Invitation
# ---------------------------------------------------------------------------

INVITATION = _label("Invitation", "Uitnodiging")
INVITATION_NUMBER = _label("Invitation Number", "Uitnodigingsnummer")
INVITATION_DATE = _label("Invitation Date", "Uitnodigingsdatum")
EVENT_DATE = _label("Event Date", "Evenementdatum")
EVENT_LOCATION = _label("Location", "Locatie")
EVENT_INVITATION = _label("Event Invitation", "Evenement Uitnodiging")
# Sentence templates with {date} and {location} placeholders
INVITATION_SENTENCE = _label(
    "We cordially invite you to the event taking place on {date} at {location}.",
    "We nodigen u van harte uit voor het evenement dat op {date} plaatsvindt "
    "bij {location}.",
)

# ---------------------------------------------------------------------------
# Agenda and attendance list
# ---------------------------------------------------------------------------

AGENDA = _label("Agenda", "Agenda")
SUBJECTS = _label("Subjects", "Onderwerpen")
ATTENDANCE_LIST = _label("Attendance List", "Aanwezigheidslijst")
LAST_NAME = _label("Last name", "Achternaam")
FIRST_NAME = _label("First name", "Voornaam")
ATTENDEE_ROLE = _label("Role", "Rol")
SIGNATURE = _label("Signature", "Handtekening")
