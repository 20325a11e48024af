"""
Bilingual (English/Sinhala) label tables.

Computation code works with canonical English keys; these tables are only
consulted when a response is rendered. Lookups fall back to English.
"""

from typing import Dict

LANGUAGES = ("en", "si")
DEFAULT_LANGUAGE = "en"

RASHI_NAMES = {
    "en": (
        "Mesha", "Vrushamba", "Mithuna", "Kataka",
        "Sinha", "Kanya", "Tula", "Vrushchika",
        "Dhanu", "Makara", "Kumbha", "Meena",
    ),
    "si": (
        "මේෂ", "වෘෂභ", "මිථුන", "කටක",
        "සිංහ", "කන්‍යා", "තුලා", "වෘශ්චික",
        "ධනු", "මකර", "කුම්භ", "මීන",
    ),
}

NAKSHATRA_NAMES = {
    "en": (
        "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
        "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
        "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
        "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishta", "Shatabhisha",
        "Purva Bhadrapada", "Uttara Bhadrapada", "Revati",
    ),
    "si": (
        "අස්විද", "බෙරණ", "කැති", "රෙහෙන", "මුවසිරස", "අද",
        "පුනාවාස", "පුෂ", "අස්ලිය", "මා", "පුවපුල්", "උත්‍රපල්",
        "හත", "සිත", "සා", "වීසා", "අනුර", "දෙට",
        "මූල", "පුවසල", "උත්‍රසල", "සුවණ", "දෙනට", "සියාවාස",
        "පුවපුටුප", "උත්‍රපුටුප", "රේවතී",
    ),
}

LABELS: Dict[str, Dict[str, Dict[str, str]]] = {
    "en": {},
    "si": {
        "planet": {
            "Sun": "රවි",
            "Moon": "චන්ද්‍ර",
            "Mercury": "බුධ",
            "Venus": "සිකුරු",
            "Mars": "කුජ",
            "Jupiter": "ගුරු",
            "Saturn": "ශනි",
            "Rahu": "රාහු",
            "Ketu": "කේතු",
        },
        "linga": {
            "Male": "පුරුෂ",
            "Female": "ස්ත්‍රී",
            "Neutral": "නපුංසක",
        },
        "gender": {
            "Male": "පුරුෂ",
            "Female": "ස්ත්‍රී",
        },
        "yoni": {
            "Horse": "අශ්වයා",
            "Elephant": "ඇතා",
            "Sheep": "බැටළුවා",
            "Snake": "සර්පයා",
            "Dog": "බල්ලා",
            "Cat": "පූසා",
            "Rat": "මීයා",
            "Cow": "එළදෙන",
            "Buffalo": "මීහරකා",
            "Tiger": "කොටියා",
            "Deer": "මුවා",
            "Monkey": "වඳුරා",
            "Lion": "සිංහයා",
        },
        "gana": {
            "Deva": "දේව",
            "Manushya": "මනුෂ්‍ය",
            "Rakshasa": "රාක්ෂ",
        },
        "nadi": {
            "Adi": "ආදි",
            "Madhya": "මධ්‍ය",
            "Anthya": "අන්ත්‍ය",
        },
        "dignity": {
            "Exalted": "උච්ච",
            "Debilitated": "නීච",
            "Own Sign": "ස්වක්ෂේත්‍ර",
            "Friendly": "මිත්‍ර",
            "Enemy": "සතුරු",
            "Neutral": "මධ්‍යස්ථ",
        },
        "aspect": {
            "conjunction": "යුති",
            "opposition": "අෂ්ටම",
            "trine": "ත්‍රිකෝණ",
            "square": "චතුරස්‍ර",
            "sextile": "ෂඩෂ්ටක",
        },
        "event": {
            "ingress": "රාශි මාරුව",
            "retrograde": "වක්‍ර ගමන",
            "direct": "සෘජු ගමන",
            "aspect": "දෘෂ්ටිය",
        },
        "strength": {
            "Strong": "ශක්තිමත්",
            "Medium": "මධ්‍යස්ථයි",
            "Weak": "දුර්වලයි",
        },
    },
}

MESSAGES = {
    "en": {
        "birthchart": "Vedic horoscope calculated successfully",
        "navamsha": "Navamsha chart calculated successfully",
        "yoga": "Yogas calculated successfully",
        "transit": "Transits calculated successfully",
        "dasha": "Dasha periods calculated successfully",
        "validationError": "Validation errors",
        "invalidDateTime": "Invalid date or time format",
        "invalidRange": "Invalid date range",
        "unauthorized": "Unauthorized access. Please provide a valid Bearer token.",
        "methodNotAllowed": "Only POST requests are allowed",
        "notFound": "Resource not found",
        "internalError": "An unexpected error occurred",
    },
    "si": {
        "birthchart": "වෛදික කේන්දරය සාර්ථකව ගණනය කරන ලදී",
        "navamsha": "නවාංශක කුණ්ඩලිය සාර්ථකව ගණනය කරන ලදී",
        "yoga": "යෝග ගණනය කිරීම සාර්ථකයි",
        "transit": "සංක්‍රාන්ති ගණනය කර ඇත",
        "dasha": "දශා ගණනය සාර්ථකයි",
        "validationError": "වලංගු කිරීමේ දෝෂ",
        "invalidDateTime": "වලංගු නොවන දිනය හෝ වේලා ආකෘතිය",
        "invalidRange": "වලංගු නොවන දින පරාසය",
        "unauthorized": "අවසර නොලත් ප්‍රවේශය. කරුණාකර වලංගු Bearer ටෝකනයක් සපයන්න.",
        "methodNotAllowed": "POST ඉල්ලීම් පමණක් අවසර ඇත",
        "notFound": "සම්පත හමු නොවීය",
        "internalError": "අනපේක්ෂිත දෝෂයක් ඇති විය",
    },
}

YOGA_TEXT = {
    "en": {
        "RajaYoga": {
            "name": 'Raja Yoga',
            "description": 'A powerful combination of Jupiter and Saturn in mutual aspects or conjunction',
            "significance": 'Royal combination indicating power, authority, and leadership potential',
            "effect": 'Brings success in leadership positions, political power, or high administrative roles. The native gains respect and authority in their field.'
        },
        "DhanaYoga": {
            "name": 'Dhana Yoga',
            "description": 'Beneficial planets in wealth-generating houses',
            "significance": 'Wealth-giving combination that promotes financial prosperity',
            "effect": 'Creates opportunities for wealth accumulation, business success, and material comforts. The native often gains through multiple sources of income.'
        },
        "GajaKesariYoga": {
            "name": 'Gaja Kesari Yoga',
            "description": 'Auspicious placement of Jupiter and Moon in angular or trine houses',
            "significance": 'Powerful yoga formed by Jupiter and Moon indicating intelligence and success',
            "effect": 'Enhances wisdom, social status, and mental capabilities. The native gains recognition and success in their endeavors.'
        },
        "BudhaAdityaYoga": {
            "name": 'Budha Aditya Yoga',
            "description": 'Close conjunction or aspect between Sun and Mercury',
            "significance": 'Yoga of intelligence formed by Sun and Mercury promoting intellectual growth',
            "effect": 'Grants strong analytical abilities, leadership qualities, and success in education or communication-related fields.'
        },
        "NeechaBhangaRajaYoga": {
            "name": 'Neecha Bhanga Raja Yoga',
            "description": 'Cancellation of planetary debilitation through special planetary positions',
            "significance": 'Turns weakness into strength, leading to unexpected success',
            "effect": 'Overcomes initial setbacks to achieve remarkable success. The native rises from humble beginnings to positions of power.'
        },
        # Pancha Mahapurusha Yogas
        "RuchakaYoga": {
            "name": 'Ruchaka Yoga',
            "description": 'Mars in own sign or exaltation in a kendra house',
            "significance": 'One of the five Mahapurusha Yogas indicating martial excellence',
            "effect": 'Grants physical strength, leadership abilities, and success in competitive fields. The native excels in sports, military, or executive positions.'
        },
        "BhadraYoga": {
            "name": 'Bhadra Yoga',
            "description": 'Mercury in own sign or exaltation in a kendra house',
            "significance": 'Mahapurusha Yoga of intelligence and communication',
            "effect": 'Enhances intellectual capabilities, business acumen, and communication skills. Success in writing, commerce, or technological fields.'
        },
        "HamsaYoga": {
            "name": 'Hamsa Yoga',
            "description": 'Jupiter in own sign or exaltation in a kendra house',
            "significance": 'Mahapurusha Yoga of wisdom and dharma',
            "effect": 'Brings spiritual wisdom, ethical conduct, and success in teaching or advisory roles. The native gains respect for their knowledge and guidance.'
        },
        "MalavyaYoga": {
            "name": 'Malavya Yoga',
            "description": 'Venus in own sign or exaltation in a kendra house',
            "significance": 'Mahapurusha Yoga of luxury and artistic excellence',
            "effect": 'Bestows artistic talents, beauty, charm, and material comforts. Success in fine arts, entertainment, or luxury industries.'
        },
        "SashaYoga": {
            "name": 'Sasha Yoga',
            "description": 'Saturn in own sign or exaltation in a kendra house',
            "significance": 'Mahapurusha Yoga of discipline and longevity',
            "effect": 'Grants endurance, discipline, and success through hard work. The native achieves lasting success in business or government service.'
        },
        # Additional Yogas
        "ViparitaRajaYoga": {
            "name": 'Viparita Raja Yoga',
            "description": 'Lords of 6th, 8th or 12th houses placed in mutual kendras',
            "significance": 'Turns negative planetary placements into positive outcomes',
            "effect": 'Creates success from seemingly adverse situations. The native overcomes obstacles to achieve unexpected prosperity.'
        },
        "MahabhagyaYoga": {
            "name": 'Mahabhagya Yoga',
            "description": 'Venus and Jupiter together in a kendra or trikona house',
            "significance": 'Yoga of great fortune and prosperity',
            "effect": 'Brings exceptional luck, wealth, and happiness in life. The native enjoys both material and spiritual benefits.'
        },
        "KesariYoga": {
            "name": 'Kesari Yoga',
            "description": 'Jupiter in a kendra from Moon',
            "significance": 'Yoga of intelligence and prosperity',
            "effect": 'Enhances wisdom, wealth, and general well-being. The native succeeds through knowledge and ethical conduct.'
        },
        "LakshmiYoga": {
            "name": 'Lakshmi Yoga',
            "description": 'Lord of 9th house in a kendra with Jupiter or Venus',
            "significance": 'Yoga of wealth and divine grace',
            "effect": 'Brings financial prosperity, spiritual growth, and divine blessings. The native gains through righteous means.'
        },
        "AmalaYoga": {
            "name": 'Amala Yoga',
            "description": 'Benefic planet in the 10th house from Moon',
            "significance": 'Yoga of pure fame and success',
            "effect": 'Grants spotless reputation, career success, and public recognition. The native achieves success without controversy.'
        },
    },
    "si": {
        "RajaYoga": {
            "name": 'රාජ යෝග',
            "description": 'ගුරු හා ශනි අතර සම්බන්ධතාවය හෝ දෘෂ්ටි',
            "significance": 'රාජ යෝග - බලය හා අධිකාරය පෙන්නුම් කරයි',
            "effect": 'නායකත්ව තනතුරු, දේශපාලන බලය හෝ පරිපාලන තනතුරු ලබා දෙයි. පුද්ගලයා ඔවුන්ගේ ක්ෂේත්‍රයේ ගෞරවය හා අධිකාරිය ලබා ගනී.'
        },
        "DhanaYoga": {
            "name": 'ධන යෝග',
            "description": 'ධන භාවයන්හි ශුභ ග්‍රහ පිහිටීම',
            "significance": 'ධන යෝග - ධනය ලැබෙන සංයෝග',
            "effect": 'ධනය රැස් කිරීමට, ව්‍යාපාර සාර්ථකත්වයට හා භෞතික සැප සම්පත් සඳහා අවස්ථා නිර්මාණය කරයි. පුද්ගලයා බහුවිධ ආදායම් මාර්ග හරහා ලාභ ලබයි.'
        },
        "GajaKesariYoga": {
            "name": 'ගජකේසරී යෝග',
            "description": 'කේන්ද්‍ර හෝ ත්‍රිකෝණ භාවයන්හි ගුරු හා චන්ද්‍රයා පිහිටීම',
            "significance": 'ගජකේසරී යෝග - ගුරු හා චන්ද්‍රයා මගින් සෑදෙන ප්‍රබල යෝග',
            "effect": 'ප්‍රඥාව, සමාජ තත්ත්වය සහ මානසික හැකියාවන් වර්ධනය කරයි. පුද්ගලයා පිළිගැනීම හා සාර්ථකත්වය ලබා ගනී.'
        },
        "BudhaAdityaYoga": {
            "name": 'බුද්ධාදිත්‍ය යෝග',
            "description": 'රවි හා බුධ අතර සමීප සම්බන්ධතාවය හෝ දෘෂ්ටි',
            "significance": 'බුද්ධාදිත්‍ය යෝග - රවි හා බුධ මගින් සෑදෙන බුද්ධිමත් යෝග',
            "effect": 'ශක්තිමත් විශ්ලේෂණ හැකියාවන්, නායකත්ව ගුණාංග, සහ අධ්‍යාපනික හෝ සන්නිවේදන ක්ෂේත්‍රවල සාර්ථකත්වය ලබා දෙයි.'
        },
        "NeechaBhangaRajaYoga": {
            "name": 'නීච භංග රාජ යෝග',
            "description": 'විශේෂ ග්‍රහ ස්ථාන හරහා ග්‍රහ නීච භංග වීම',
            "significance": 'නීච භංග රාජ යෝග - නීච භංග වීමෙන් ඇතිවන රාජ යෝග',
            "effect": 'මුල් කාලීන බාධක ජය ගෙන විශිෂ්ට සාර්ථකත්වයක් ලබා ගනී. පුද්ගලයා පහළ මට්ටමක සිට බලවත් තත්ත්වයකට ඔසවා තබයි.'
        },
        # Pancha Mahapurusha Yogas
        "RuchakaYoga": {
            "name": 'රුචක යෝග',
            "description": 'කුජ ස්වක්ෂේත්‍ර හෝ උච්ච රාශියේ කේන්ද්‍රයක පිහිටීම',
            "significance": 'රුචක යෝග - පංච මහාපුරුෂ යෝග අතරින් එකක්',
            "effect": 'කායික ශක්තිය, නායකත්ව හැකියාවන්, සහ තරඟකාරී ක්ෂේත්‍රවල සාර්ථකත්වය ලබා දෙයි. ක්‍රීඩා, යුද හමුදා, හෝ විධායක තනතුරුවල විශිෂ්ටත්වය ලබයි.'
        },
        "BhadraYoga": {
            "name": 'භද්‍ර යෝග',
            "description": 'බුධ ස්වක්ෂේත්‍ර හෝ උච්ච රාශියේ කේන්ද්‍රයක පිහිටීම',
            "significance": 'භද්‍ර යෝග - බුද්ධිය හා සන්නිවේදනය පිළිබඳ මහාපුරුෂ යෝග',
            "effect": 'බුද්ධිමය හැකියාවන්, ව්‍යාපාරික දක්ෂතා, සහ සන්නිවේදන කුසලතා වර්ධනය කරයි. ලේඛනය, වාණිජ්‍යය, හෝ තාක්ෂණික ක්ෂේත්‍රවල සාර්ථකත්වය.'
        },
        "HamsaYoga": {
            "name": 'හංස යෝග',
            "description": 'ගුරු ස්වක්ෂේත්‍ර හෝ උච්ච රාශියේ කේන්ද්‍රයක පිහිටීම',
            "significance": 'හංස යෝග - ප්‍රඥාව හා ධර්මය පිළිබඳ මහාපුරුෂ යෝග',
            "effect": 'ආධ්‍යාත්මික ප්‍රඥාව, සදාචාරාත්මක හැසිරීම, සහ ඉගැන්වීමේ හෝ උපදේශන කාර්යයන්හි සාර්ථකත්වය ගෙන දෙයි. පුද්ගලයා ඔවුන්ගේ දැනුම හා මඟපෙන්වීම සඳහා ගෞරවය ලබා ගනී.'
        },
        "MalavyaYoga": {
            "name": 'මාලවී යෝග',
            "description": 'සිකුරු ස්වක්ෂේත්‍ර හෝ උච්ච රාශියේ කේන්ද්‍රයක පිහිටීම',
            "significance": 'මාලවී යෝග - සුඛෝපභෝගී හා කලාත්මක විශිෂ්ටත්වය පිළිබඳ මහාපුරුෂ යෝග',
            "effect": 'කලාත්මක දක්ෂතා, සෞන්දර්යය, ආකර්ෂණීය බව, සහ භෞතික සැප පහසුකම් ලබා දෙයි. සියුම් කලා, විනෝදාස්වාද, හෝ සුඛෝපභෝගී කර්මාන්තවල සාර්ථකත්වය.'
        },
        "SashaYoga": {
            "name": 'ශශ යෝග',
            "description": 'ශනි ස්වක්ෂේත්‍ර හෝ උච්ච රාශියේ කේන්ද්‍රයක පිහිටීම',
            "significance": 'ශශ යෝග - විනය හා ආයුෂ පිළිබඳ මහාපුරුෂ යෝග',
            "effect": 'දීර්ඝායුෂ, විනය, සහ කැපවීමෙන් කරන වැඩ තුළින් සාර්ථකත්වය ලබා දෙයි. පුද්ගලයා ව්‍යාපාර හෝ රාජ්‍ය සේවයේ චිරස්ථායී සාර්ථකත්වයක් ලබා ගනී.'
        },
        # Additional Yogas
        "ViparitaRajaYoga": {
            "name": 'විපරීත රාජ යෝග',
            "description": '6,8,12 අධිපතීන් අන්‍යෝන්‍ය කේන්ද්‍රයන්හි පිහිටීම',
            "significance": 'විපරීත රාජ යෝග - අහිතකර ග්‍රහ පිහිටීම් හිතකර ප්‍රතිඵල බවට හැරවීම',
            "effect": 'අහිතකර තත්ත්වයන්ගෙන් සාර්ථකත්වය නිර්මාණය කරයි. පුද්ගලයා බාධක ජය ගනිමින් අනපේක්ෂිත සමෘද්ධිය ලබා ගනී.'
        },
        "MahabhagyaYoga": {
            "name": 'මහාභාග්‍ය යෝග',
            "description": 'සිකුරු හා ගුරු කේන්ද්‍ර හෝ ත්‍රිකෝණයක එකට පිහිටීම',
            "significance": 'මහාභාග්‍ය යෝග - මහත් වාසනාව හා සමෘද්ධිය',
            "effect": 'අසාමාන්‍ය වාසනාව, ධනය, සහ ජීවිතයේ සතුට ගෙන එයි. පුද්ගලයා භෞතික හා ආධ්‍යාත්මික යන දෙඅංශයෙන්ම ප්‍රතිලාභ ලබයි.'
        },
        "KesariYoga": {
            "name": 'කේසරි යෝග',
            "description": 'චන්ද්‍රයාගෙන් කේන්ද්‍රයක ගුරු පිහිටීම',
            "significance": 'කේසරි යෝග - බුද්ධිය හා සමෘද්ධිය පිළිබඳ යෝග',
            "effect": 'ප්‍රඥාව, ධනය, සහ සාමාන්‍ය යහපැවැත්ම වර්ධනය කරයි. පුද්ගලයා දැනුම හා සදාචාරාත්මක හැසිරීම තුළින් සාර්ථකත්වය ලබා ගනී.'
        },
        "LakshmiYoga": {
            "name": 'ලක්ෂ්මී යෝග',
            "description": 'නවමාධිපති කේන්ද්‍රයක ගුරු හෝ සිකුරු සමඟ පිහිටීම',
            "significance": 'ලක්ෂ්මී යෝග - ධනය හා දිව්‍ය ආශිර්වාද',
            "effect": 'මූල්‍ය සමෘද්ධිය, ආධ්‍යාත්මික වර්ධනය, සහ දිව්‍ය ආශිර්වාද ගෙන එයි. පුද්ගලයා ධර්මිෂ්ඨ මාර්ග හරහා ලාභ ලබා ගනී.'
        },
        "AmalaYoga": {
            "name": 'අමල යෝග',
            "description": 'චන්ද්‍රයාගෙන් දසමයේ ශුභ ග්‍රහයෙක් පිහිටීම',
            "significance": 'අමල යෝග - පිරිසිදු කීර්තිය හා සාර්ථකත්වය',
            "effect": 'නිර්මල කීර්ති නාමය, වෘත්තීය සාර්ථකත්වය, සහ පොදු පිළිගැනීම ලබා දෙයි. පුද්ගලයා විවාදයකින් තොරව සාර්ථකත්වය ලබා ගනී.'
        },
    },
}

DASHA_PREDICTIONS = {
    "en": {
        "Ketu": 'Ketu is a shadow planet, often associated with spiritual detachment, past-life karma, and mysticism. During this dasha, material ambitions tend to lose importance, and life may bring unexplainable separations or losses that push the native toward self-realization. This period can feel isolating, as relationships and attachments begin to dissolve. In careers, there may be instability, sudden changes, or a withdrawal from positions of power. Health might suffer due to unknown causes or psychological stress. Yet, if Ketu is well-placed, it can be a time of deep inner growth, powerful intuitive development, and liberation from worldly entanglements. It’s a phase where renunciation, detachment, and spirituality become dominant themes.',
        "Venus": 'Venus brings a long and generally pleasant period characterized by love, luxury, relationships, artistic expression, and comfort. Individuals may find success in areas related to creativity, fashion, design, entertainment, or any beauty-related industry. This is often a period where romantic relationships flourish, and marriage or long-term partnerships may begin. Financially, this can be a prosperous time with gains from investments, vehicles, homes, and other material comforts. However, if Venus is afflicted, the native might indulge in lust, overconsumption, or unhealthy attachments, leading to emotional disappointment or financial issues. Spiritually, Venus can open the path to divine love and devotion (bhakti) if channeled correctly.',
        "Sun": 'The Sun’s dasha is a time of ego development, leadership, and self-expression. Individuals are often drawn into the spotlight, assuming positions of authority or responsibility. This can be a favorable time for political, government, or administrative careers, and recognition for one’s efforts is likely. The native’s relationship with the father or authority figures may come into focus, for better or worse. The Sun also governs health, vitality, and inner strength. If well-placed, this period boosts confidence and respect, but if afflicted, it may bring ego clashes, loss of reputation, or health issues related to the heart or eyes. It tests your sense of purpose and your ability to lead with integrity.',
        "Moon": 'The Moon governs emotions, mind, mother, and nurturing energy. This dasha heightens sensitivity and emotional intelligence. It’s a time when the native may focus on home life, emotional security, and close relationships. The Moon also governs public image, so people in professions involving the public, hospitality, or healing may thrive. If well-placed, it brings peace, maternal support, and mental clarity. However, if the Moon is afflicted, it can bring emotional turbulence, mood swings, and mental health struggles like depression or anxiety. The person becomes more in tune with their intuitive and subconscious world, which can be either healing or overwhelming, depending on chart strength.',
        "Mars": "Mars brings raw energy, ambition, and courage. This period is action-packed and tests one's willpower and aggression. It’s excellent for careers that involve risk, discipline, or competition, such as the military, sports, engineering, or entrepreneurship. When well-placed, Mars brings rapid success through hard work, assertiveness, and fearlessness. However, when poorly placed, it leads to conflicts, accidents, impulsiveness, and violent behavior. Mars also affects relationships, especially the marital bond, through dominance or sexual frustration. This dasha demands physical activity and strategic action. Spiritually, Mars can channel its energy into disciplined sadhana (practice) and service.",
        "Rahu": "Rahu, the North Node, brings a long period marked by intense desires, material ambition, deception, and foreign influences. This period can bring sudden rise or fall, exposure to foreign cultures, technology, and even scandals or fame. The native might experience a strong craving for recognition, power, or sensual pleasures. If well-placed, Rahu can offer immense success in unconventional fields like politics, media, or IT. But when afflicted, it leads to illusion, addiction, fraud, or betrayal. Psychologically, the person may face confusion, anxiety, or identity crises. Rahu tempts with the world, but also teaches that desire without wisdom leads to suffering. This dasha transforms the individual by breaking their attachment to illusions.",
        "Jupiter": "Jupiter brings wisdom, expansion, and blessings. It’s often one of the most favorable dashas, depending on its strength in the chart. Jupiter governs education, children, marriage (especially for women), ethics, and spiritual growth. This period is ideal for deepening knowledge, starting a family, or becoming a teacher/mentor. Financial growth is common, especially through law, teaching, banking, or philosophy. The person becomes more optimistic, charitable, and spiritually inclined. If afflicted, Jupiter’s excess can lead to overconfidence, self-righteousness, or legal problems. This dasha rewards those who walk the path of dharma (righteousness), and those who misuse its gifts may later face karmic corrections.",
        "Saturn": "Saturn is the great teacher and taskmaster. Its dasha is long and can feel heavy, but it builds maturity, patience, and discipline. This period often brings responsibilities, hard work, delays, and tests in every area of life. The native may feel isolated, restricted, or burdened, especially in relationships and career. However, those who embrace responsibility, serve others, and live ethically often receive immense long-term rewards. Saturn strengthens your foundations. If poorly placed, it brings depression, loss, health issues, and karmic suffering. Spiritually, it forces introspection and renunciation of ego. The soul is refined through trials. By the end of this dasha, the person is usually wiser and more grounded.",
        "Mercury": "Mercury governs intellect, communication, business, and adaptability. This dasha is fast-paced, favoring those in fields like writing, teaching, commerce, IT, and diplomacy. The native becomes mentally agile, witty, and curious. Financial gains through clever thinking or trading are common. When well-placed, Mercury enhances speech, negotiation, and analytical ability. If afflicted, it causes mental restlessness, deceit, or anxiety. Relationships during this period can be stimulating but unstable. This is a time when adaptability and intelligence can elevate one’s status quickly. Spiritually, Mercury can help the native question belief systems and refine their understanding of truth through logic and study."
    },
    "si": {
        "Ketu": "කේතු යනු සෙවනැලි ග්‍රහයෙක් වන අතර එය ආත්මීය විනිවිදභාවය, පෙර ජන්ම කර්ම සහ අධිභෞතිකත්වය සමඟ සම්බන්ධ වේ. මෙම දශාව තුළ ද්‍රව්යමය අභිලාෂයන් වැදගත්කම අඩු වන අතර ජීවිතයේ පැහැදිලි කළ නොහැකි වෙන්වීම් හෝ අලාභ සිදුවිය හැකි අතර එමඟින් පුද්ගලයා ආත්ම සාක්ෂාත්කරණය කරා යොමු වේ. මෙම කාලය තනිවීමක් ලෙස හැඟිය හැකිය, මන්ද සබඳතා සහ බැඳීම් අඩුවී යයි. වෘත්තීය ජීවිතයේ අස්ථාවරත්වය, අකස්මාත්‍ර වෙනස්වීම් හෝ බලතල ස්ථාන වලින් ඉවත්වීම් සිදුවිය හැකිය. නිශ්චිත හේතු නොමැතිව හෝ මානසික ආතතිය නිසා සෞඛ්‍ය ගැටළු ඇති විය හැකිය. කෙසේ වෙතත්, කේතු හොඳින් ස්ථාපිත වී ඇත්නම්, එය ගැඹුරු අභ්‍යන්තර වර්ධනය, බලවත් අන්තර්දෘෂ්ටික විකාසය සහ ලෝකයේ බැඳීම් වලින් මිදීමේ කාලයක් විය හැකිය. මෙය ත්‍යාගශීලී භාවය, විනිවිදභාවය සහ ආත්මීයත්වය ප්‍රධාන තේමා වන අවධියකි.",
        "Venus": "ශුක්‍ර දශාව ආදරය, විලාසිතා, සබඳතා, කලාත්මක ප්‍රකාශන සහ සැපයුම් වැනි ගති ගුණ මගින් සංලක්ෂිත දිගු හා සාමාන්‍යයෙන් සතුටුදායක කාලයක් ගෙන එයි. පුද්ගලයන්ට නිර්මාණශීලිත්වය, විලාසිතා, නිර්මාණ, විනෝදාස්වාදය හෝ අලංකාරය සම්බන්ධ කර්මාන්ත වල සාර්ථකත්වය ලබා ගත හැකිය. මෙය බොහෝ විට ආදරණීය සබඳතා වර්ධනය වන කාලයක් වන අතර විවාහය හෝ දිගුකාලීන සහභාගීත්වය ආරම්භ විය හැකිය. මූල්‍යමය වශයෙන්, මෙය ආයෝජන, වාහන, නිවාස සහ අනෙකුත් භෞතික සැපයුම් වලින් ලාභ ලබා ගත හැකි සමෘද්ධිමත් කාලයකි. කෙසේ වෙතත්, ශුක්‍ර අපහසුතාවයන්ට ලක් වී ඇත්නම්, පුද්ගලයා කාමය, අතිභෝගත්වය හෝ අසශීලී බැඳීම් වල නියැලීමට ඉඩ ඇති අතර එමඟින් චිත්තවේදනාත්මක අසනීප හෝ මූල්‍ය ගැටළු ඇති විය හැකිය. ආත්මීය වශයෙන්, ශුක්‍ර නිවැරදිව මග පෙන්වන්නේ නම් එය දිව්‍යමය ආදරය සහ භක්තිය කරා ගමන් කිරීමට මග පාදා දෙයි.",
        "Sun": "රවිගේ දශාව අහංකාරය, නායකත්වය සහ ස්වයං ප්‍රකාශනය වර්ධනය කරන කාලයකි. පුද්ගලයන් බොහෝ විට spot එලයට ඇදී ගොස් බලතල ස්ථාන හෝ වගකීම් දරණ තනතුරු භාර ගනීති. මෙය දේශපාලන, රජය හෝ පරිපාලන වෘත්තීන් සඳහා උචිත කාලයක් වන අතර ඔවුන්ගේ ප්‍රයත්න සඳහා පිළිගැනීමක් ලැබිය හැකිය. පියා හෝ බලතල ස්ථාන වල පුද්ගලයන් සමඟ සබඳතා වඩාත් වැදගත් විය හැකිය, එය හොඳට හෝ නරකට. රවි සෞඛ්‍යය, ශක්තිය සහ අභ්‍යන්තර ශක්තිය ද පාලනය කරයි. හොඳින් ස්ථාපිත වී ඇත්නම්, මෙම කාලය ආත්ම විශ්වාසය සහ ගෞරවය වර්ධනය කරයි, නමුත් අපහසුතාවයන්ට ලක් වී ඇත්නම් අහංකාරයේ ගැටුම්, කීර්තිනාමය අහිමි වීම හෝ හෘදය හෝ ඇස් සම්බන්ධ සෞඛ්‍ය ගැටළු ඇති විය හැකිය. එය ඔබේ අරමුණු සහ සංකල්පය සමඟ සංයමයෙන් නායකත්වය දැරීමේ හැකියාව පරීක්ෂා කරයි.",
        "Moon": "චන්ද්‍රයා චිත්තවේග, මනස, මව සහ පෝෂණ ශක්තිය පාලනය කරයි. මෙම දශාව සංවේදනශීලීත්වය සහ චිත්තවේගීය බුද්ධිය වර්ධනය කරයි. මෙය පුද්ගලයා නිවසේ ජීවිතය, චිත්තවේගීය සුරක්ෂිතභාවය සහ සමීප සබඳතා වෙත අවධානය යොමු කරන කාලයකි. චන්ද්‍රයා මහජන චිත්‍රය ද පාලනය කරයි, එබැවින් මහජන, අතිථි සත්කාර හෝ සායනික වෘත්තීන් වල නියැලෙන පුද්ගලයන්ට යහපත් අවස්ථා ලැබිය හැකිය. හොඳින් ස්ථාපිත වී ඇත්නම්, එය සාමය, මාතෘ සහයෝගය සහ මානසික පැහැදිලි භාවය ගෙන එයි. කෙසේ වෙතත්, චන්ද්‍රයා අපහසුතාවයන්ට ලක් වී ඇත්නම්, එය චිත්තවේගීය අස්ථාවරත්වය, මනෝභාවයේ වෙනස්වීම් සහ චිත්තවේගීය ගැටළු (උදා: අවපීඩනය හෝ කාංසාව) ඇති කළ හැකිය. පුද්ගලයා ඔවුන්ගේ අන්තර්දෘෂ්ටික හා යටිසුවඳැරුණු ලෝකය සමඟ වැඩි සුසංයෝගයක් ඇති කර ගනී, එය ඔවුන්ගේ ජාතක බලය අනුව සානි සුවදායක හෝ අතිශයින් බරපතල විය හැකිය.",
        "Mars": "කුජ ග්‍රහයා ගෙන එන්නේ අමිහිරි ශක්තිය, අභිලාෂය සහ ධෛර්යයයි. මෙම කාලය ක්‍රියාශීලී වන අතර එක් අයෙකුගේ අධිෂ්ඨානය හා ආක්‍රමණශීලීත්වය පරීක්ෂා කරයි. යුධ හමුදා, ක්‍රීඩා, ඉංජිනේරු විද්‍යාව හෝ ව්‍යවසායකත්වය වැනි අවදානම්, විනය හෝ තරඟකාරීත්වය සම්බන්ධ වෘත්තීන් සඳහා මෙය විශිෂ්ට කාලයකි. හොඳින් ස්ථාපිත වී ඇත්නම්, කුජ දැඩි වැඩ, නිර්භීතභාවය සහ නිර්භයක්‍රමවත් බව මගින් ඉක්මන් සාර්ථකත්වය ගෙන එයි. කෙසේ වෙතත්, නරක ලෙස ස්ථාපිත වී ඇත්නම්, එය ගැටුම්, අනතුරු, ආවේගශීලී චර්යාව සහ ත්‍රස්තවාදී හැසිරීම් වලට තුඩු දිය හැකිය. කුජ සබඳතා (විශේෂයෙන් විවාහ බන්ධනය) ද බලපායි, නායකත්වය හෝ ලිංගික නොසන්සුන්තාවය මගින්. මෙම දශාව ශාරීරික ක්‍රියාකාරකම් සහ උපායමාර්ගික ක්‍රියාමාර්ග ඉල්ලා සිටී. ආත්මීය වශයෙන්, කුජ එහි ශක්තිය විනයගරුක සාධන (පුරුදු) සහ සේවය තුළට යොමු කළ හැකිය.",
        "Rahu": "රාහු ගෙන එන්නේ තීව්‍ර ආශා, ද්‍රව්යමය අභිලාෂය, වංචා සහ විදේශීය බලපෑම් වලින් සංලක්ෂිත දිගු කාලයකි. මෙම කාලය තුළ අක්‍රමණශීලී ඉහළ යාමක් හෝ පහත වැටීමක්, විදේශීය සංස්කෘතීන්, තාක්ෂණය සහ අපකීර්තිය හෝ කීර්තියට ලක්වීම සිදුවිය හැකිය. පුද්ගලයාට පිළිගැනීම, බලය හෝ ලෝකීය සුඛෝපභෝගීත්වය පිළිබඳ තීව්‍ර ආශා ඇති විය හැකිය. හොඳින් ස්ථාපිත වී ඇත්නම්, රාහු දේශපාලනය, මාධ්‍ය හෝ තොරතුරු තාක්ෂණය වැනි සාම්ප්‍රදායික නොවන ක්ෂේත්‍ර වල විශාල සාර්ථකත්වය ලබා දිය හැකිය. නමුත් අපහසුතාවයන්ට ලක් වී ඇත්නම්, එය මායා, ආසක්තිය, වංචා හෝ විශ්වාසභංගත්වය වැනි දේවල් වලට තුඩු දිය හැකිය. මානසික වශයෙන්, පුද්ගලයා ව්‍යාකූලත්වය, කාංසාව හෝ අනන්‍යතා අර්බුද වලට මුහුණ දිය හැකිය. රාහු ලෝකයෙන් ප්‍රලෝභනය කරයි, නමුත් ඥානය නොමැතිව ආශා කිරීම දුකට තුඩු දෙන බව ඉගැන්වීම ද කරයි. මෙම දශාව පුද්ගලයා ඔවුන්ගේ මායා වලට ඇති බැඳීම් බිඳ දමා පරිවර්තනය කරයි.",
        "Jupiter": "ගුරු ග්‍රහයා ඥානය, ප්‍රසාරණය සහ ආශිර්වාද ගෙන එයි. ජාතක රාශියේ එහි ශක්තිය අනුව මෙය බොහෝ විට වාසනාවන්ත දශාවක් වේ. ගුරු අධ්‍යාපනය, දරුවන්, විවාහය (විශේෂයෙන් කාන්තාවන් සඳහා), ආචාර ධර්ම සහ ආත්මීය වර්ධනය පාලනය කරයි. මෙම කාලය දැනුම ගැඹුරු කර ගැනීම, පවුලක් ආරම්භ කිරීම හෝ ගුරු/මාර්ගදර්ශක වීම සඳහා ඉතා සුදුසුය. නීතිය, ඉගැන්වීම, බැංකුකරණය හෝ දර්ශනය වැනි ක්ෂේත්‍ර හරහා මූල්‍ය වර්ධනය සිදුවිය හැකිය. පුද්ගලයා වඩාත් ආශාවන්ත, දානශීලී සහ ආත්මීය ලෙස නැඹුරු වේ. අපහසුතාවයන්ට ලක් වී ඇත්නම්, ගුරුගේ අධික භාවය අධිශ්‍රද්ධාව, ස්වයං-සාධාරණත්වය හෝ නීතිමය ගැටළු වලට තුඩු දිය හැකිය. මෙම දශාව ධර්මය (සදාචාරය) මග පිළිපදින අයට ප්‍රතිඵල ලබා දෙන අතර එහි ත්‍යාග අනිසි ලෙස භාවිතා කරන අයට පසුව කර්මික නිවැරදි කිරීම් මුහුණ දිය හැකිය.",
        "Saturn": "සෙනසුරු යනු මහා ගුරුවරයා සහ කාර්ය භාර ගන්නා අයයි. එහි දශාව දිගු වන අතර බරපතල යැයි හැඟිය හැකි නමුත් එය පරිණතභාවය, ඉවසීම සහ විනය ගොඩනඟයි. මෙම කාලය ජීවිතයේ සෑම අංශයකම වගකීම්, දැඩි වැඩ, ප්‍රමාද සහ පරීක්ෂණ ගෙන එයි. පුද්ගලයා වෙන්වීම, සීමා කිරීම් හෝ බර යැයි හැඟිය හැකිය, විශේෂයෙන් සබඳතා සහ වෘත්තීය ජීවිතය තුළ. කෙසේ වෙතත්, වගකීම් භාර ගන්නා, අන් අයට සේවය කරන සහ සදාචාරමය ජීවිතයක් ගත කරන අයට දිගු කාලීන විශාල ඵලදායීතා ලැබිය හැකිය. සැනසුම් ඔබේ අත්තිවාරම් ශක්තිමත් කරයි. නරක ලෙස ස්ථාපිත වී ඇත්නම්, එය අවපීඩනය, අලාභ, සෞඛ්‍ය ගැටළු සහ කර්මික දුක්ඛිත භාවය ගෙන එයි. ආත්මීය වශයෙන්, එය අභ්‍යන්තර ගවේෂණය සහ අහංකාරය අත්හැරීමට බල කරයි. ආත්මය පරීක්ෂණ හරහා පිරිසිදු කරනු ලැබේ. මෙම දශාව අවසානයේ පුද්ගලයා සාමාන්‍යයෙන් ඥානවන්ත හා වඩාත් ස්ථාවර වේ.",
        "Mercury": "බුධ බුද්ධිය, සන්නිවේදනය, ව්‍යාපාර සහ අනුවර්තනය පාලනය කරයි. මෙම දශාව වේගවත් වන අතර ලේඛන, ඉගැන්වීම, වාණිජ, තොරතුරු තාක්ෂණය සහ රාජ්‍ය තාන්ත්‍රික වැනි ක්ෂේත්‍ර වල නියැලෙන අයට උචිතයි. පුද්ගලයා මානසික වශයෙන් ක්‍රියාශීලී, විචක්ෂණශීලී සහ කුතුහලයෙන් පිරි වේ. උපායමාර්ගික චින්තනය හෝ වෙළඳාම් හරහා මූල්‍ය ලාභ ලැබිය හැකිය. හොඳින් ස්ථාපිත වී ඇත්නම්, බුධ වාචික හැකියාව, සාකච්ඡා කිරීම සහ විශ්ලේෂණාත්මක හැකියාව වර්ධනය කරයි. අපහසුතාවයන්ට ලක් වී ඇත්නම්, එය මානසික අස්ථාවරත්වය, වංචා හෝ කාංසාව ඇති කළ හැකිය. මෙම කාලය තුළ සබඳතා උත්තේජනය කරන නමුත් අස්ථාවර විය හැකිය. මෙය අනුවර්තනය හා බුද්ධිය මගින් යමෙකුගේ තත්ත්වය ඉක්මනින් ඉහළ නංවා ගත හැකි කාලයකි. ආත්මීය වශයෙන්, බුධ පුද්ගලයාට ඇදහිලි පද්ධති පිළිබඳව ප්‍රශ්න ඇසීමට සහ තර්කනය හා අධ්‍යයනය හරහා සත්‍යය පිළිබඳ ඔවුන්ගේ අවබෝධය පිරිපහදු කිරීමට උපකාරී වේ."
    },
}

DASHA_OUTCOMES = {
    "en": {
        "Ketu": 'Mysterious losses, spiritual awakening',
        "Venus": 'Romance, creativity, wealth',
        "Sun": 'Leadership, ego tests, recognition',
        "Moon": 'Domestic happiness or mental instability',
        "Mars": 'Action, risk-taking, conflict or gain',
        "Rahu": 'Unconventional success or chaos',
        "Jupiter": 'Education, family, spiritual growth',
        "Saturn": 'Delays, trials, maturity, hard-earned success',
        "Mercury": 'Business success, mental stimulation'
    },
    "si": {
        "Ketu": "අද්භූත අලාභ, ආත්මික අවබෝධය",
        "Venus": "ප්‍රේමය, නිර්මාණශීලිත්වය, සම්පත්",
        "Sun": "නායකත්වය, අහංකාරයේ පරීක්ෂා, පිළිගැනීම",
        "Moon": "ගෘහස්ථ සතුට හෝ මානසික අස්ථාවරත්වය",
        "Mars": "ක්‍රියා, අවදානම් ගැනීම, ගැටුම් හෝ ලාභ",
        "Rahu": "සාම්ප්‍රදායික නොවන සාර්ථකත්වය හෝ අවුල්",
        "Jupiter": "අධ්‍යාපනය, පවුල, ආත්මික වර්ධනය",
        "Saturn": "ප්‍රමාද, පරීක්ෂණ, පරිණත භාවය, කැපවීමෙන් ලැබෙන ජය",
        "Mercury": "ව්‍යාපාරික සාර්ථකත්වය, මානසික උත්තේජනය"
    },
}


def normalize_language(language) -> str:
    return language if language in LANGUAGES else DEFAULT_LANGUAGE


def label(category: str, key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Localized label for a canonical English key; unknown keys come back unchanged."""
    return LABELS.get(language, {}).get(category, {}).get(key, key)


def rashi_name(sign_index: int, language: str = DEFAULT_LANGUAGE) -> str:
    return RASHI_NAMES[normalize_language(language)][sign_index % 12]


def nakshatra_name(index: int, language: str = DEFAULT_LANGUAGE) -> str:
    return NAKSHATRA_NAMES[normalize_language(language)][index]


def message(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    lang = normalize_language(language)
    return MESSAGES[lang].get(key, MESSAGES[DEFAULT_LANGUAGE].get(key, key))


def yoga_text(key: str, language: str = DEFAULT_LANGUAGE) -> Dict[str, str]:
    return dict(YOGA_TEXT[normalize_language(language)][key])


def dasha_text(lord: str, language: str = DEFAULT_LANGUAGE) -> Dict[str, str]:
    lang = normalize_language(language)
    return {
        "generalOutcome": DASHA_OUTCOMES[lang][lord],
        "prediction": DASHA_PREDICTIONS[lang][lord],
    }
