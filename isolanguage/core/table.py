"""ISO 639-1 language table.

Each row is ``(code, code_t, code_b, name, family)``. Rows are listed in the
conventional order of the standard, which is also the iteration order.
"""

from __future__ import annotations

LANGUAGE_TABLE: tuple[tuple[str, str, str, str, str], ...] = (
    ("ab", "abk", "abk", "Abkhazian", "Northwest Caucasian"),
    ("aa", "aar", "aar", "Afar", "Afro-Asiatic"),
    ("af", "afr", "afr", "Afrikaans", "Indo-European"),
    ("ak", "aka", "aka", "Akan", "Niger–Congo"),
    ("sq", "sqi", "alb", "Albanian", "Indo-European"),
    ("am", "amh", "amh", "Amharic", "Afro-Asiatic"),
    ("ar", "ara", "ara", "Arabic", "Afro-Asiatic"),
    ("an", "arg", "arg", "Aragonese", "Indo-European"),
    ("hy", "hye", "arm", "Armenian", "Indo-European"),
    ("as", "asm", "asm", "Assamese", "Indo-European"),
    ("av", "ava", "ava", "Avaric", "Northeast Caucasian"),
    ("ae", "ave", "ave", "Avestan", "Indo-European"),
    ("ay", "aym", "aym", "Aymara", "Aymaran"),
    ("az", "aze", "aze", "Azerbaijani", "Turkic"),
    ("bm", "bam", "bam", "Bambara", "Niger–Congo"),
    ("ba", "bak", "bak", "Bashkir", "Turkic"),
    ("eu", "eus", "baq", "Basque", "Language isolate"),
    ("be", "bel", "bel", "Belarusian", "Indo-European"),
    ("bn", "ben", "ben", "Bengali", "Indo-European"),
    ("bh", "bih", "bih", "Bihari languages", "Indo-European"),
    ("bi", "bis", "bis", "Bislama", "Creole"),
    ("bs", "bos", "bos", "Bosnian", "Indo-European"),
    ("br", "bre", "bre", "Breton", "Indo-European"),
    ("bg", "bul", "bul", "Bulgarian", "Indo-European"),
    ("my", "mya", "bur", "Burmese", "Sino-Tibetan"),
    ("ca", "cat", "cat", "Catalan", "Indo-European"),
    ("ch", "cha", "cha", "Chamorro", "Austronesian"),
    ("ce", "che", "che", "Chechen", "Northeast Caucasian"),
    ("ny", "nya", "nya", "Chichewa", "Niger–Congo"),
    ("zh", "zho", "chi", "Chinese", "Sino-Tibetan"),
    ("cv", "chv", "chv", "Chuvash", "Turkic"),
    ("kw", "cor", "cor", "Cornish", "Indo-European"),
    ("co", "cos", "cos", "Corsican", "Indo-European"),
    ("cr", "cre", "cre", "Cree", "Algonquian"),
    ("hr", "hrv", "hrv", "Croatian", "Indo-European"),
    ("cs", "ces", "cze", "Czech", "Indo-European"),
    ("da", "dan", "dan", "Danish", "Indo-European"),
    ("dv", "div", "div", "Divehi", "Indo-European"),
    ("nl", "nld", "dut", "Dutch", "Indo-European"),
    ("dz", "dzo", "dzo", "Dzongkha", "Sino-Tibetan"),
    ("en", "eng", "eng", "English", "Indo-European"),
    ("eo", "epo", "epo", "Esperanto", "Constructed"),
    ("et", "est", "est", "Estonian", "Uralic"),
    ("ee", "ewe", "ewe", "Ewe", "Niger–Congo"),
    ("fo", "fao", "fao", "Faroese", "Indo-European"),
    ("fj", "fij", "fij", "Fijian", "Austronesian"),
    ("fi", "fin", "fin", "Finnish", "Uralic"),
    ("fr", "fra", "fre", "French", "Indo-European"),
    ("ff", "ful", "ful", "Fulah", "Niger–Congo"),
    ("gl", "glg", "glg", "Galician", "Indo-European"),
    ("ka", "kat", "geo", "Georgian", "Kartvelian"),
    ("de", "deu", "ger", "German", "Indo-European"),
    ("el", "ell", "gre", "Greek", "Indo-European"),
    ("gn", "grn", "grn", "Guarani", "Tupian"),
    ("gu", "guj", "guj", "Gujarati", "Indo-European"),
    ("ht", "hat", "hat", "Haitian", "Creole"),
    ("ha", "hau", "hau", "Hausa", "Afro-Asiatic"),
    ("he", "heb", "heb", "Hebrew", "Afro-Asiatic"),
    ("hz", "her", "her", "Herero", "Niger–Congo"),
    ("hi", "hin", "hin", "Hindi", "Indo-European"),
    ("ho", "hmo", "hmo", "Hiri Motu", "Austronesian"),
    ("hu", "hun", "hun", "Hungarian", "Uralic"),
    ("ia", "ina", "ina", "Interlingua", "Constructed"),
    ("id", "ind", "ind", "Indonesian", "Austronesian"),
    ("ie", "ile", "ile", "Interlingue", "Constructed"),
    ("ga", "gle", "gle", "Irish", "Indo-European"),
    ("ig", "ibo", "ibo", "Igbo", "Niger–Congo"),
    ("ik", "ipk", "ipk", "Inupiaq", "Eskimo–Aleut"),
    ("io", "ido", "ido", "Ido", "Constructed"),
    ("is", "isl", "ice", "Icelandic", "Indo-European"),
    ("it", "ita", "ita", "Italian", "Indo-European"),
    ("iu", "iku", "iku", "Inuktitut", "Eskimo–Aleut"),
    ("ja", "jpn", "jpn", "Japanese", "Japonic"),
    ("jv", "jav", "jav", "Javanese", "Austronesian"),
    ("kl", "kal", "kal", "Kalaallisut", "Eskimo–Aleut"),
    ("kn", "kan", "kan", "Kannada", "Dravidian"),
    ("kr", "kau", "kau", "Kanuri", "Nilo-Saharan"),
    ("ks", "kas", "kas", "Kashmiri", "Indo-European"),
    ("kk", "kaz", "kaz", "Kazakh", "Turkic"),
    ("km", "khm", "khm", "Central Khmer", "Austroasiatic"),
    ("ki", "kik", "kik", "Kikuyu", "Niger–Congo"),
    ("rw", "kin", "kin", "Kinyarwanda", "Niger–Congo"),
    ("ky", "kir", "kir", "Kirghiz", "Turkic"),
    ("kv", "kom", "kom", "Komi", "Uralic"),
    ("kg", "kon", "kon", "Kongo", "Niger–Congo"),
    ("ko", "kor", "kor", "Korean", "Koreanic"),
    ("ku", "kur", "kur", "Kurdish", "Indo-European"),
    ("kj", "kua", "kua", "Kuanyama", "Niger–Congo"),
    ("la", "lat", "lat", "Latin", "Indo-European"),
    ("lb", "ltz", "ltz", "Luxembourgish", "Indo-European"),
    ("lg", "lug", "lug", "Ganda", "Niger–Congo"),
    ("li", "lim", "lim", "Limburgan", "Indo-European"),
    ("ln", "lin", "lin", "Lingala", "Niger–Congo"),
    ("lo", "lao", "lao", "Lao", "Tai–Kadai"),
    ("lt", "lit", "lit", "Lithuanian", "Indo-European"),
    ("lu", "lub", "lub", "Luba-Katanga", "Niger–Congo"),
    ("lv", "lav", "lav", "Latvian", "Indo-European"),
    ("gv", "glv", "glv", "Manx", "Indo-European"),
    ("mk", "mkd", "mac", "Macedonian", "Indo-European"),
    ("mg", "mlg", "mlg", "Malagasy", "Austronesian"),
    ("ms", "msa", "may", "Malay", "Austronesian"),
    ("ml", "mal", "mal", "Malayalam", "Dravidian"),
    ("mt", "mlt", "mlt", "Maltese", "Afro-Asiatic"),
    ("mi", "mri", "mao", "Maori", "Austronesian"),
    ("mr", "mar", "mar", "Marathi", "Indo-European"),
    ("mh", "mah", "mah", "Marshallese", "Austronesian"),
    ("mn", "mon", "mon", "Mongolian", "Mongolic"),
    ("na", "nau", "nau", "Nauru", "Austronesian"),
    ("nv", "nav", "nav", "Navajo", "Dené–Yeniseian"),
    ("nd", "nde", "nde", "North Ndebele", "Niger–Congo"),
    ("ne", "nep", "nep", "Nepali", "Indo-European"),
    ("ng", "ndo", "ndo", "Ndonga", "Niger–Congo"),
    ("nb", "nob", "nob", "Norwegian Bokmål", "Indo-European"),
    ("nn", "nno", "nno", "Norwegian Nynorsk", "Indo-European"),
    ("no", "nor", "nor", "Norwegian", "Indo-European"),
    ("ii", "iii", "iii", "Sichuan Yi", "Sino-Tibetan"),
    ("nr", "nbl", "nbl", "South Ndebele", "Niger–Congo"),
    ("oc", "oci", "oci", "Occitan", "Indo-European"),
    ("oj", "oji", "oji", "Ojibwa", "Algonquian"),
    ("cu", "chu", "chu", "Church Slavic", "Indo-European"),
    ("om", "orm", "orm", "Oromo", "Afro-Asiatic"),
    ("or", "ori", "ori", "Oriya", "Indo-European"),
    ("os", "oss", "oss", "Ossetian", "Indo-European"),
    ("pa", "pan", "pan", "Punjabi", "Indo-European"),
    ("pi", "pli", "pli", "Pali", "Indo-European"),
    ("fa", "fas", "per", "Persian", "Indo-European"),
    ("pl", "pol", "pol", "Polish", "Indo-European"),
    ("ps", "pus", "pus", "Pashto", "Indo-European"),
    ("pt", "por", "por", "Portuguese", "Indo-European"),
    ("qu", "que", "que", "Quechua", "Quechuan"),
    ("rm", "roh", "roh", "Romansh", "Indo-European"),
    ("rn", "run", "run", "Rundi", "Niger–Congo"),
    ("ro", "ron", "rum", "Romanian", "Indo-European"),
    ("ru", "rus", "rus", "Russian", "Indo-European"),
    ("sa", "san", "san", "Sanskrit", "Indo-European"),
    ("sc", "srd", "srd", "Sardinian", "Indo-European"),
    ("sd", "snd", "snd", "Sindhi", "Indo-European"),
    ("se", "sme", "sme", "Northern Sami", "Uralic"),
    ("sm", "smo", "smo", "Samoan", "Austronesian"),
    ("sg", "sag", "sag", "Sango", "Creole"),
    ("sr", "srp", "srp", "Serbian", "Indo-European"),
    ("gd", "gla", "gla", "Gaelic", "Indo-European"),
    ("sn", "sna", "sna", "Shona", "Niger–Congo"),
    ("si", "sin", "sin", "Sinhala", "Indo-European"),
    ("sk", "slk", "slo", "Slovak", "Indo-European"),
    ("sl", "slv", "slv", "Slovenian", "Indo-European"),
    ("so", "som", "som", "Somali", "Afro-Asiatic"),
    ("st", "sot", "sot", "Southern Sotho", "Niger–Congo"),
    ("es", "spa", "spa", "Spanish", "Indo-European"),
    ("su", "sun", "sun", "Sundanese", "Austronesian"),
    ("sw", "swa", "swa", "Swahili", "Niger–Congo"),
    ("ss", "ssw", "ssw", "Swati", "Niger–Congo"),
    ("sv", "swe", "swe", "Swedish", "Indo-European"),
    ("ta", "tam", "tam", "Tamil", "Dravidian"),
    ("te", "tel", "tel", "Telugu", "Dravidian"),
    ("tg", "tgk", "tgk", "Tajik", "Indo-European"),
    ("th", "tha", "tha", "Thai", "Tai–Kadai"),
    ("ti", "tir", "tir", "Tigrinya", "Afro-Asiatic"),
    ("bo", "bod", "tib", "Tibetan", "Sino-Tibetan"),
    ("tk", "tuk", "tuk", "Turkmen", "Turkic"),
    ("tl", "tgl", "tgl", "Tagalog", "Austronesian"),
    ("tn", "tsn", "tsn", "Tswana", "Niger–Congo"),
    ("to", "ton", "ton", "Tonga", "Austronesian"),
    ("tr", "tur", "tur", "Turkish", "Turkic"),
    ("ts", "tso", "tso", "Tsonga", "Niger–Congo"),
    ("tt", "tat", "tat", "Tatar", "Turkic"),
    ("tw", "twi", "twi", "Twi", "Niger–Congo"),
    ("ty", "tah", "tah", "Tahitian", "Austronesian"),
    ("ug", "uig", "uig", "Uighur", "Turkic"),
    ("uk", "ukr", "ukr", "Ukrainian", "Indo-European"),
    ("ur", "urd", "urd", "Urdu", "Indo-European"),
    ("uz", "uzb", "uzb", "Uzbek", "Turkic"),
    ("ve", "ven", "ven", "Venda", "Niger–Congo"),
    ("vi", "vie", "vie", "Vietnamese", "Austroasiatic"),
    ("vo", "vol", "vol", "Volapük", "Constructed"),
    ("wa", "wln", "wln", "Walloon", "Indo-European"),
    ("cy", "cym", "wel", "Welsh", "Indo-European"),
    ("wo", "wol", "wol", "Wolof", "Niger–Congo"),
    ("fy", "fry", "fry", "Western Frisian", "Indo-European"),
    ("xh", "xho", "xho", "Xhosa", "Niger–Congo"),
    ("yi", "yid", "yid", "Yiddish", "Indo-European"),
    ("yo", "yor", "yor", "Yoruba", "Niger–Congo"),
    ("za", "zha", "zha", "Zhuang", "Tai–Kadai"),
    ("zu", "zul", "zul", "Zulu", "Niger–Congo"),
)

# Sorted alphabetically, independent of the table order.
FAMILIES: tuple[str, ...] = (
    "Afro-Asiatic",
    "Algonquian",
    "Austroasiatic",
    "Austronesian",
    "Aymaran",
    "Constructed",
    "Creole",
    "Dené–Yeniseian",
    "Dravidian",
    "Eskimo–Aleut",
    "Indo-European",
    "Japonic",
    "Kartvelian",
    "Koreanic",
    "Language isolate",
    "Mongolic",
    "Niger–Congo",
    "Nilo-Saharan",
    "Northeast Caucasian",
    "Northwest Caucasian",
    "Quechuan",
    "Sino-Tibetan",
    "Tai–Kadai",
    "Tupian",
    "Turkic",
    "Uralic",
)
