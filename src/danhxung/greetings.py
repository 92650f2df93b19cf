"""Greeting examples and confidence scores for resolved titles."""

from danhxung.models import AddressTitle, Certainty

GREETINGS: dict[AddressTitle, tuple[str, ...]] = {
    AddressTitle.BA: ("Con chào Ba ạ", "Ba có khỏe không ạ?"),
    AddressTitle.ME: ("Con chào Mẹ ạ", "Mẹ có khỏe không ạ?"),
    AddressTitle.BAC_TRAI: ("Cháu chào Bác ạ", "Cháu nhờ Bác giúp..."),
    AddressTitle.BAC_GAI: ("Cháu chào Bác ạ", "Cháu nhờ Bác giúp..."),
    AddressTitle.CHU: ("Cháu chào Chú ạ", "Chú có khỏe không ạ?"),
    AddressTitle.CO: ("Cháu chào Cô ạ", "Cô có khỏe không ạ?"),
    AddressTitle.CAU: ("Cháu chào Cậu ạ", "Cậu có khỏe không ạ?"),
    AddressTitle.DI: ("Cháu chào Dì ạ", "Dì có khỏe không ạ?"),
    AddressTitle.THIM: ("Cháu chào Thím ạ", "Thím có khỏe không ạ?"),
    AddressTitle.DUONG: ("Cháu chào Dượng ạ", "Dượng có khỏe không ạ?"),
    AddressTitle.MO: ("Cháu chào Mợ ạ", "Mợ có khỏe không ạ?"),
    AddressTitle.ANH_HO: ("Em chào Anh họ", "Anh họ có khỏe không?"),
    AddressTitle.CHI_HO: ("Em chào Chị họ", "Chị họ có khỏe không?"),
    AddressTitle.EM_HO: ("Anh/Chị chào Em họ", "Em họ có khỏe không?"),
    AddressTitle.ANH: ("Em chào Anh", "Anh có khỏe không?"),
    AddressTitle.CHI: ("Em chào Chị", "Chị có khỏe không?"),
    AddressTitle.EM: ("Anh/Chị chào Em", "Em có khỏe không?"),
    AddressTitle.CON: ("Ba/Mẹ chào con", "Con có khỏe không?"),
    AddressTitle.CHAU: ("Ông/Bà chào cháu", "Cháu có khỏe không?"),
    AddressTitle.ONG_NOI: ("Cháu chào Ông ạ", "Ông có khỏe không ạ?"),
    AddressTitle.BA_NOI: ("Cháu chào Bà ạ", "Bà có khỏe không ạ?"),
    AddressTitle.ONG_NGOAI: ("Cháu chào Ông ạ", "Ông có khỏe không ạ?"),
    AddressTitle.BA_NGOAI: ("Cháu chào Bà ạ", "Bà có khỏe không ạ?"),
    AddressTitle.SELF: (),
    AddressTitle.UNKNOWN: (),
}

_missing = set(AddressTitle) - set(GREETINGS)
if _missing:
    raise RuntimeError(f"Greeting table is missing titles: {sorted(t.name for t in _missing)}")

CONFIDENCE: dict[Certainty, float] = {
    Certainty.CERTAIN: 1.0,
    Certainty.INFERRED: 0.9,
    Certainty.UNCERTAIN: 0.6,
    Certainty.UNKNOWN: 0.0,
}


def greeting_examples(title: AddressTitle | str) -> tuple[str, ...]:
    """Example phrases for greeting someone addressed as `title`."""
    if isinstance(title, AddressTitle):
        return GREETINGS[title]
    if not title.strip():
        return ()
    return (f"Xin chào {title}",)


def confidence(title: AddressTitle | str, certainty: Certainty) -> float:
    if title == AddressTitle.UNKNOWN:
        return 0.0
    return CONFIDENCE[certainty]
