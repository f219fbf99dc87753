"""Representative cities per country, region or alias name.

Aliases, historical names and regional groupings resolve to the same triple
as their modern equivalent so that loosely worded questions still hit.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Tuple


logger = logging.getLogger(__name__)


TOP_CITIES: Mapping[str, Tuple[str, str, str]] = MappingProxyType(
    {
        # Major economies
        "japan": ("Tokyo", "Osaka", "Kyoto"),
        "india": ("Mumbai", "Delhi", "Bangalore"),
        "pakistan": ("Karachi", "Lahore", "Islamabad"),
        "switzerland": ("Zurich", "Geneva", "Basel"),
        "germany": ("Berlin", "Munich", "Hamburg"),
        "france": ("Paris", "Lyon", "Marseille"),
        "uk": ("London", "Manchester", "Birmingham"),
        "united kingdom": ("London", "Manchester", "Birmingham"),
        "china": ("Beijing", "Shanghai", "Guangzhou"),
        "usa": ("New York", "Los Angeles", "Chicago"),
        "united states": ("New York", "Los Angeles", "Chicago"),
        "canada": ("Toronto", "Vancouver", "Montreal"),
        "australia": ("Sydney", "Melbourne", "Brisbane"),
        "south korea": ("Seoul", "Busan", "Incheon"),
        "russia": ("Moscow", "St. Petersburg", "Novosibirsk"),
        "brazil": ("São Paulo", "Rio de Janeiro", "Brasília"),
        "mexico": ("Mexico City", "Guadalajara", "Monterrey"),
        "italy": ("Rome", "Milan", "Naples"),
        "spain": ("Madrid", "Barcelona", "Valencia"),
        "netherlands": ("Amsterdam", "Rotterdam", "The Hague"),
        "belgium": ("Brussels", "Antwerp", "Ghent"),
        "sweden": ("Stockholm", "Gothenburg", "Malmö"),
        "norway": ("Oslo", "Bergen", "Trondheim"),
        "denmark": ("Copenhagen", "Aarhus", "Odense"),
        "finland": ("Helsinki", "Tampere", "Turku"),
        "poland": ("Warsaw", "Krakow", "Gdansk"),
        "turkey": ("Istanbul", "Ankara", "Izmir"),
        "israel": ("Tel Aviv", "Jerusalem", "Haifa"),
        "south africa": ("Cape Town", "Johannesburg", "Durban"),
        "egypt": ("Cairo", "Alexandria", "Giza"),
        "nigeria": ("Lagos", "Abuja", "Kano"),
        "kenya": ("Nairobi", "Mombasa", "Kisumu"),
        "morocco": ("Casablanca", "Rabat", "Marrakech"),
        "algeria": ("Algiers", "Oran", "Constantine"),
        "tunisia": ("Tunis", "Sfax", "Sousse"),
        "libya": ("Tripoli", "Benghazi", "Misrata"),
        "ethiopia": ("Addis Ababa", "Dire Dawa", "Mekelle"),
        "ghana": ("Accra", "Kumasi", "Tamale"),
        "ivory coast": ("Abidjan", "Bouaké", "Daloa"),
        "senegal": ("Dakar", "Thiès", "Kaolack"),
        "mali": ("Bamako", "Sikasso", "Mopti"),
        "burkina faso": ("Ouagadougou", "Bobo-Dioulasso", "Koudougou"),
        "niger": ("Niamey", "Zinder", "Maradi"),
        "chad": ("N'Djamena", "Moundou", "Sarh"),
        "cameroon": ("Yaoundé", "Douala", "Garoua"),
        "central african republic": ("Bangui", "Bimbo", "Berbérati"),
        "democratic republic of congo": ("Kinshasa", "Lubumbashi", "Mbuji-Mayi"),
        "republic of congo": ("Brazzaville", "Pointe-Noire", "Dolisie"),
        "gabon": ("Libreville", "Port-Gentil", "Franceville"),
        "equatorial guinea": ("Malabo", "Bata", "Ebebiyin"),
        "sao tome and principe": ("São Tomé", "Santo António", "Neves"),
        "cape verde": ("Praia", "Mindelo", "Santa Maria"),
        "guinea-bissau": ("Bissau", "Bafatá", "Gabú"),
        "guinea": ("Conakry", "Nzérékoré", "Kankan"),
        "sierra leone": ("Freetown", "Bo", "Kenema"),
        "liberia": ("Monrovia", "Gbarnga", "Kakata"),
        "madagascar": ("Antananarivo", "Toamasina", "Antsirabe"),
        "mauritius": ("Port Louis", "Beau Bassin-Rose Hill", "Vacoas-Phoenix"),
        "seychelles": ("Victoria", "Anse Boileau", "Beau Vallon"),
        "comoros": ("Moroni", "Mutsamudu", "Fomboni"),
        "djibouti": ("Djibouti City", "Ali Sabieh", "Dikhil"),
        "eritrea": ("Asmara", "Keren", "Massawa"),
        "somalia": ("Mogadishu", "Hargeisa", "Bosaso"),
        "sudan": ("Khartoum", "Omdurman", "Port Sudan"),
        "south sudan": ("Juba", "Wau", "Malakal"),
        "uganda": ("Kampala", "Gulu", "Lira"),
        "rwanda": ("Kigali", "Butare", "Gitarama"),
        "burundi": ("Gitega", "Bujumbura", "Muyinga"),
        "tanzania": ("Dar es Salaam", "Mwanza", "Arusha"),
        "zambia": ("Lusaka", "Kitwe", "Ndola"),
        "malawi": ("Lilongwe", "Blantyre", "Mzuzu"),
        "mozambique": ("Maputo", "Matola", "Beira"),
        "zimbabwe": ("Harare", "Bulawayo", "Chitungwiza"),
        "botswana": ("Gaborone", "Francistown", "Molepolole"),
        "namibia": ("Windhoek", "Rundu", "Walvis Bay"),
        "angola": ("Luanda", "Huambo", "Lobito"),
        "argentina": ("Buenos Aires", "Córdoba", "Rosario"),
        "chile": ("Santiago", "Valparaíso", "Concepción"),
        "peru": ("Lima", "Arequipa", "Trujillo"),
        "colombia": ("Bogotá", "Medellín", "Cali"),
        "venezuela": ("Caracas", "Maracaibo", "Valencia"),
        "ecuador": ("Quito", "Guayaquil", "Cuenca"),
        "bolivia": ("La Paz", "Santa Cruz", "Cochabamba"),
        "paraguay": ("Asunción", "Ciudad del Este", "San Lorenzo"),
        "uruguay": ("Montevideo", "Salto", "Paysandú"),
        "guyana": ("Georgetown", "Linden", "New Amsterdam"),
        "suriname": ("Paramaribo", "Lelydorp", "Nieuw Nickerie"),
        "french guiana": ("Cayenne", "Saint-Laurent-du-Maroni", "Kourou"),

        # Caribbean
        "bahamas": ("Nassau", "Freeport", "West End"),
        "barbados": ("Bridgetown", "Speightstown", "Oistins"),
        "jamaica": ("Kingston", "Spanish Town", "Portmore"),
        "trinidad and tobago": ("Port of Spain", "San Fernando", "Chaguanas"),
        "cuba": ("Havana", "Santiago de Cuba", "Camagüey"),
        "haiti": ("Port-au-Prince", "Cap-Haïtien", "Gonaïves"),
        "dominican republic": ("Santo Domingo", "Santiago", "La Romana"),
        "puerto rico": ("San Juan", "Bayamón", "Carolina"),
        "grenada": ("St. George's", "Gouyave", "Grenville"),
        "saint lucia": ("Castries", "Bisée", "Vieux Fort"),
        "saint vincent and the grenadines": ("Kingstown", "Georgetown", "Barrouallie"),
        "antigua and barbuda": ("St. John's", "All Saints", "Liberta"),
        "dominica": ("Roseau", "Portsmouth", "Marigot"),
        "saint kitts and nevis": ("Basseterre", "Charlestown", "Monkey Hill"),
        "bermuda": ("Hamilton", "St. George's", "Somerset"),
        "aruba": ("Oranjestad", "San Nicolas", "Noord"),
        "virgin islands": ("Charlotte Amalie", "Christiansted", "Cruz Bay"),
        "cayman islands": ("George Town", "West Bay", "Bodden Town"),

        # Asia
        "thailand": ("Bangkok", "Phuket", "Chiang Mai"),
        "vietnam": ("Ho Chi Minh City", "Hanoi", "Da Nang"),
        "singapore": ("Singapore", "Jurong", "Woodlands"),
        "malaysia": ("Kuala Lumpur", "George Town", "Ipoh"),
        "indonesia": ("Jakarta", "Surabaya", "Medan"),
        "philippines": ("Manila", "Quezon City", "Davao"),
        "cambodia": ("Phnom Penh", "Siem Reap", "Battambang"),
        "laos": ("Vientiane", "Luang Prabang", "Savannakhet"),
        "myanmar": ("Yangon", "Mandalay", "Naypyidaw"),
        "bangladesh": ("Dhaka", "Chittagong", "Sylhet"),
        "sri lanka": ("Colombo", "Kandy", "Galle"),
        "nepal": ("Kathmandu", "Pokhara", "Lalitpur"),
        "bhutan": ("Thimphu", "Phuntsholing", "Punakha"),
        "maldives": ("Malé", "Addu City", "Fuvahmulah"),
        "afghanistan": ("Kabul", "Kandahar", "Herat"),
        "iran": ("Tehran", "Mashhad", "Isfahan"),
        "iraq": ("Baghdad", "Basra", "Mosul"),
        "syria": ("Damascus", "Aleppo", "Homs"),
        "lebanon": ("Beirut", "Tripoli", "Sidon"),
        "jordan": ("Amman", "Zarqa", "Irbid"),
        "saudi arabia": ("Riyadh", "Jeddah", "Mecca"),
        "uae": ("Dubai", "Abu Dhabi", "Sharjah"),
        "united arab emirates": ("Dubai", "Abu Dhabi", "Sharjah"),
        "qatar": ("Doha", "Al Rayyan", "Umm Salal"),
        "kuwait": ("Kuwait City", "Al Ahmadi", "Hawalli"),
        "bahrain": ("Manama", "Riffa", "Muharraq"),
        "oman": ("Muscat", "Seeb", "Salalah"),
        "yemen": ("Sana'a", "Aden", "Taiz"),
        "mongolia": ("Ulaanbaatar", "Erdenet", "Darkhan"),
        "kazakhstan": ("Almaty", "Nur-Sultan", "Shymkent"),
        "uzbekistan": ("Tashkent", "Samarkand", "Namangan"),
        "kyrgyzstan": ("Bishkek", "Osh", "Jalal-Abad"),
        "tajikistan": ("Dushanbe", "Khujand", "Kulob"),
        "turkmenistan": ("Ashgabat", "Turkmenbashi", "Daşoguz"),

        # Europe
        "greece": ("Athens", "Thessaloniki", "Patras"),
        "austria": ("Vienna", "Salzburg", "Innsbruck"),
        "czech republic": ("Prague", "Brno", "Ostrava"),
        "slovakia": ("Bratislava", "Košice", "Prešov"),
        "hungary": ("Budapest", "Debrecen", "Szeged"),
        "romania": ("Bucharest", "Cluj-Napoca", "Timișoara"),
        "bulgaria": ("Sofia", "Plovdiv", "Varna"),
        "croatia": ("Zagreb", "Split", "Rijeka"),
        "serbia": ("Belgrade", "Novi Sad", "Niš"),
        "bosnia and herzegovina": ("Sarajevo", "Banja Luka", "Tuzla"),
        "montenegro": ("Podgorica", "Nikšić", "Pljevlja"),
        "north macedonia": ("Skopje", "Bitola", "Kumanovo"),
        "albania": ("Tirana", "Durrës", "Vlorë"),
        "slovenia": ("Ljubljana", "Maribor", "Celje"),
        "estonia": ("Tallinn", "Tartu", "Narva"),
        "latvia": ("Riga", "Daugavpils", "Liepāja"),
        "lithuania": ("Vilnius", "Kaunas", "Klaipėda"),
        "belarus": ("Minsk", "Gomel", "Mogilev"),
        "ukraine": ("Kyiv", "Kharkiv", "Odesa"),
        "moldova": ("Chișinău", "Tiraspol", "Bălți"),
        "georgia": ("Tbilisi", "Batumi", "Kutaisi"),
        "armenia": ("Yerevan", "Gyumri", "Vanadzor"),
        "azerbaijan": ("Baku", "Ganja", "Sumgayit"),
        "cyprus": ("Nicosia", "Limassol", "Larnaca"),
        "malta": ("Valletta", "Birkirkara", "Mosta"),
        "iceland": ("Reykjavik", "Kópavogur", "Hafnarfjörður"),
        "ireland": ("Dublin", "Cork", "Limerick"),
        "portugal": ("Lisbon", "Porto", "Vila Nova de Gaia"),
        "luxembourg": ("Luxembourg City", "Esch-sur-Alzette", "Differdange"),
        "liechtenstein": ("Vaduz", "Schaan", "Balzers"),
        "monaco": ("Monaco", "Monte Carlo", "La Condamine"),
        "andorra": ("Andorra la Vella", "Escaldes-Engordany", "Encamp"),
        "san marino": ("San Marino", "Serravalle", "Borgo Maggiore"),
        "vatican city": ("Vatican City", "St. Peter's", "Sistine Chapel"),

        # Oceania
        "new zealand": ("Auckland", "Wellington", "Christchurch"),
        "fiji": ("Suva", "Nadi", "Lautoka"),
        "papua new guinea": ("Port Moresby", "Lae", "Mount Hagen"),
        "solomon islands": ("Honiara", "Gizo", "Auki"),
        "vanuatu": ("Port Vila", "Luganville", "Isangel"),
        "samoa": ("Apia", "Asau", "Mulifanua"),
        "tonga": ("Nuku'alofa", "Neiafu", "Haveluloto"),
        "kiribati": ("Tarawa", "Betio", "Bikenibeu"),
        "tuvalu": ("Funafuti", "Savave", "Tanrake"),
        "nauru": ("Yaren", "Baiti", "Anabar"),
        "palau": ("Ngerulmud", "Koror", "Airai"),
        "marshall islands": ("Majuro", "Ebeye", "Arno"),
        "micronesia": ("Palikir", "Weno", "Tofol"),
        "cook islands": ("Avarua", "Amuri", "Matavera"),
        "niue": ("Alofi", "Hakupu", "Vaiea"),
        "tokelau": ("Atafu", "Nukunonu", "Fakaofo"),

        # Country name variations and aliases
        "america": ("New York", "Los Angeles", "Chicago"),
        "britain": ("London", "Manchester", "Birmingham"),
        "england": ("London", "Manchester", "Birmingham"),
        "holland": ("Amsterdam", "Rotterdam", "The Hague"),
        "persia": ("Tehran", "Mashhad", "Isfahan"),
        "burma": ("Yangon", "Mandalay", "Naypyidaw"),
        "ceylon": ("Colombo", "Kandy", "Galle"),
        "siam": ("Bangkok", "Phuket", "Chiang Mai"),
        "czechoslovakia": ("Prague", "Brno", "Ostrava"),
        "yugoslavia": ("Belgrade", "Zagreb", "Sarajevo"),
        "soviet union": ("Moscow", "St. Petersburg", "Novosibirsk"),
        "ussr": ("Moscow", "St. Petersburg", "Novosibirsk"),
        "korea": ("Seoul", "Busan", "Incheon"),
        "republic of korea": ("Seoul", "Busan", "Incheon"),
        "dprk": ("Pyongyang", "Hamhung", "Chongjin"),
        "north korea": ("Pyongyang", "Hamhung", "Chongjin"),
        "democratic people's republic of korea": ("Pyongyang", "Hamhung", "Chongjin"),
        "emirates": ("Dubai", "Abu Dhabi", "Sharjah"),
        "congo": ("Kinshasa", "Lubumbashi", "Mbuji-Mayi"),
        "zaire": ("Kinshasa", "Lubumbashi", "Mbuji-Mayi"),
        "rhodesia": ("Harare", "Bulawayo", "Chitungwiza"),
        "abyssinia": ("Addis Ababa", "Dire Dawa", "Mekelle"),
        "formosa": ("Taipei", "Kaohsiung", "Taichung"),
        "taiwan": ("Taipei", "Kaohsiung", "Taichung"),
        "republic of china": ("Taipei", "Kaohsiung", "Taichung"),
        "people's republic of china": ("Beijing", "Shanghai", "Guangzhou"),
        "mainland china": ("Beijing", "Shanghai", "Guangzhou"),
        "prc": ("Beijing", "Shanghai", "Guangzhou"),
        "roc": ("Taipei", "Kaohsiung", "Taichung"),

        # Common alternative spellings
        "phillipines": ("Manila", "Quezon City", "Davao"),
        "philipines": ("Manila", "Quezon City", "Davao"),
        "phillippines": ("Manila", "Quezon City", "Davao"),
        "viet nam": ("Ho Chi Minh City", "Hanoi", "Da Nang"),
        "lao": ("Vientiane", "Luang Prabang", "Savannakhet"),
        "kampuchea": ("Phnom Penh", "Siem Reap", "Battambang"),
        "khmer republic": ("Phnom Penh", "Siem Reap", "Battambang"),

        # Regional groupings
        "balkans": ("Belgrade", "Zagreb", "Sarajevo"),
        "scandinavia": ("Stockholm", "Oslo", "Copenhagen"),
        "nordic countries": ("Stockholm", "Oslo", "Copenhagen"),
        "benelux": ("Brussels", "Amsterdam", "Luxembourg City"),
        "maghreb": ("Casablanca", "Algiers", "Tunis"),
        "levant": ("Beirut", "Damascus", "Amman"),
        "gulf states": ("Dubai", "Doha", "Kuwait City"),
        "persian gulf": ("Dubai", "Doha", "Kuwait City"),
        "arabian gulf": ("Dubai", "Doha", "Kuwait City"),
        "horn of africa": ("Addis Ababa", "Mogadishu", "Asmara"),
        "east africa": ("Nairobi", "Dar es Salaam", "Kampala"),
        "west africa": ("Lagos", "Accra", "Dakar"),
        "central africa": ("Kinshasa", "Yaoundé", "Bangui"),
        "southern africa": ("Johannesburg", "Cape Town", "Harare"),
        "north africa": ("Cairo", "Casablanca", "Algiers"),
        "sub-saharan africa": ("Lagos", "Nairobi", "Johannesburg"),
        "sahel": ("Bamako", "Niamey", "N'Djamena"),

        # General regions
        "africa": ("Cairo", "Lagos", "Johannesburg"),
        "middle east": ("Dubai", "Riyadh", "Tehran"),
        "southeast asia": ("Bangkok", "Singapore", "Jakarta"),
        "south asia": ("Mumbai", "Delhi", "Dhaka"),
        "east asia": ("Beijing", "Tokyo", "Seoul"),
        "central asia": ("Almaty", "Tashkent", "Bishkek"),
        "western europe": ("London", "Paris", "Berlin"),
        "eastern europe": ("Moscow", "Warsaw", "Prague"),
        "southern europe": ("Rome", "Madrid", "Athens"),
        "northern europe": ("Stockholm", "Oslo", "Helsinki"),
        "north america": ("New York", "Toronto", "Mexico City"),
        "south america": ("São Paulo", "Buenos Aires", "Lima"),
        "central america": ("Mexico City", "Guatemala City", "San José"),
        "caribbean": ("Havana", "Kingston", "San Juan"),
        "oceania": ("Sydney", "Auckland", "Suva"),
        "pacific islands": ("Suva", "Apia", "Nuku'alofa"),
    }
)


def normalize_country(country: str) -> str:
    return country.strip().lower()


def top_cities(country: str) -> List[str]:
    """Return the three representative cities for ``country``.

    Unknown names fall back to ``[country]``: the name itself stands in as the
    only city.
    """
    cities = TOP_CITIES.get(normalize_country(country))
    if cities is None:
        logger.info("No city mapping for %r, using the name itself", country)
        return [country]
    return list(cities)


def is_known_country(country: str) -> bool:
    return normalize_country(country) in TOP_CITIES


def known_countries() -> frozenset:
    return frozenset(TOP_CITIES)


__all__ = ["TOP_CITIES", "top_cities", "is_known_country", "known_countries", "normalize_country"]
