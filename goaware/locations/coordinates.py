"""Coordinates for the cities named in :mod:`goaware.locations.cities`.

Keys are ``"<city>,<country>"`` in lower case. Alias country names get their
own entries; no alias resolution happens here. Pairs without an entry resolve
to :data:`DEFAULT_COORDINATE`.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from ..entities import Coordinate


logger = logging.getLogger(__name__)


DEFAULT_COORDINATE = Coordinate(25.0, 0.0)


CITY_COORDINATES: Mapping[str, Coordinate] = MappingProxyType(
    {
        # Major countries
        "tokyo,japan": Coordinate(35.6762, 139.6503),
        "osaka,japan": Coordinate(34.6937, 135.5023),
        "kyoto,japan": Coordinate(35.0116, 135.7681),

        "mumbai,india": Coordinate(19.0760, 72.8777),
        "delhi,india": Coordinate(28.7041, 77.1025),
        "bangalore,india": Coordinate(12.9716, 77.5946),

        "karachi,pakistan": Coordinate(24.8607, 67.0011),
        "lahore,pakistan": Coordinate(31.5497, 74.3436),
        "islamabad,pakistan": Coordinate(33.6844, 73.0479),

        # Europe
        "zurich,switzerland": Coordinate(47.3769, 8.5417),
        "geneva,switzerland": Coordinate(46.2044, 6.1432),
        "basel,switzerland": Coordinate(47.5596, 7.5886),

        "berlin,germany": Coordinate(52.5200, 13.4050),
        "munich,germany": Coordinate(48.1351, 11.5820),
        "hamburg,germany": Coordinate(53.5511, 9.9937),

        "paris,france": Coordinate(48.8566, 2.3522),
        "lyon,france": Coordinate(45.7640, 4.8357),
        "marseille,france": Coordinate(43.2965, 5.3698),

        "london,uk": Coordinate(51.5074, -0.1278),
        "manchester,uk": Coordinate(53.4808, -2.2426),
        "birmingham,uk": Coordinate(52.4862, -1.8904),

        "london,united kingdom": Coordinate(51.5074, -0.1278),
        "manchester,united kingdom": Coordinate(53.4808, -2.2426),
        "birmingham,united kingdom": Coordinate(52.4862, -1.8904),

        # Americas
        "new york,usa": Coordinate(40.7128, -74.0060),
        "los angeles,usa": Coordinate(34.0522, -118.2437),
        "chicago,usa": Coordinate(41.8781, -87.6298),

        "new york,united states": Coordinate(40.7128, -74.0060),
        "los angeles,united states": Coordinate(34.0522, -118.2437),
        "chicago,united states": Coordinate(41.8781, -87.6298),

        "toronto,canada": Coordinate(43.6532, -79.3832),
        "vancouver,canada": Coordinate(49.2827, -123.1207),
        "montreal,canada": Coordinate(45.5017, -73.5673),

        # Asia Pacific
        "beijing,china": Coordinate(39.9042, 116.4074),
        "shanghai,china": Coordinate(31.2304, 121.4737),
        "guangzhou,china": Coordinate(23.1291, 113.2644),

        "sydney,australia": Coordinate(-33.8688, 151.2093),
        "melbourne,australia": Coordinate(-37.8136, 144.9631),
        "brisbane,australia": Coordinate(-27.4698, 153.0251),

        "seoul,south korea": Coordinate(37.5665, 126.9780),
        "busan,south korea": Coordinate(35.1796, 129.0756),
        "incheon,south korea": Coordinate(37.4563, 126.7052),

        # Greece
        "athens,greece": Coordinate(37.9838, 23.7275),
        "thessaloniki,greece": Coordinate(40.6401, 22.9444),
        "patras,greece": Coordinate(38.2466, 21.7346),

        # Austria
        "vienna,austria": Coordinate(48.2082, 16.3738),
        "salzburg,austria": Coordinate(47.8095, 13.0550),
        "innsbruck,austria": Coordinate(47.2692, 11.4041),

        # Yemen
        "sana'a,yemen": Coordinate(15.3694, 44.1910),
        "aden,yemen": Coordinate(12.7794, 45.0367),
        "taiz,yemen": Coordinate(13.5795, 44.0209),

        # Caribbean
        "havana,cuba": Coordinate(23.1136, -82.3666),
        "santiago de cuba,cuba": Coordinate(20.0247, -75.8219),
        "camagüey,cuba": Coordinate(21.3794, -77.9169),

        "port-au-prince,haiti": Coordinate(18.5944, -72.3074),
        "cap-haïtien,haiti": Coordinate(19.7570, -72.2014),
        "gonaïves,haiti": Coordinate(19.4515, -72.6890),

        # Seychelles
        "victoria,seychelles": Coordinate(-4.6191, 55.4513),
        "anse boileau,seychelles": Coordinate(-4.7167, 55.4833),
        "beau vallon,seychelles": Coordinate(-4.6167, 55.4333),

        # Thailand
        "bangkok,thailand": Coordinate(13.7563, 100.5018),
        "phuket,thailand": Coordinate(7.8804, 98.3923),
        "chiang mai,thailand": Coordinate(18.7883, 98.9853),

        # Senegal
        "dakar,senegal": Coordinate(14.7167, -17.4677),
        "thiès,senegal": Coordinate(14.7886, -16.9260),
        "kaolack,senegal": Coordinate(14.1512, -16.0728),

        # Bahamas
        "nassau,bahamas": Coordinate(25.0443, -77.3504),
        "freeport,bahamas": Coordinate(26.5312, -78.6956),
        "west end,bahamas": Coordinate(26.6861, -78.9764),

        # Other Caribbean
        "bridgetown,barbados": Coordinate(13.1139, -59.5989),
        "speightstown,barbados": Coordinate(13.2500, -59.6333),
        "oistins,barbados": Coordinate(13.0667, -59.5333),

        "kingston,jamaica": Coordinate(17.9970, -76.7936),
        "spanish town,jamaica": Coordinate(17.9911, -76.9574),
        "portmore,jamaica": Coordinate(17.9500, -76.8833),

        "port of spain,trinidad and tobago": Coordinate(10.6596, -61.5089),
        "san fernando,trinidad and tobago": Coordinate(10.2796, -61.4589),
        "chaguanas,trinidad and tobago": Coordinate(10.5167, -61.4167),

        "santo domingo,dominican republic": Coordinate(18.4861, -69.9312),
        "santiago,dominican republic": Coordinate(19.4517, -70.6970),
        "la romana,dominican republic": Coordinate(18.4273, -68.9728),

        # Russia, Latin America and southern Europe
        "moscow,russia": Coordinate(55.7558, 37.6176),
        "st. petersburg,russia": Coordinate(59.9311, 30.3609),
        "novosibirsk,russia": Coordinate(55.0084, 82.9357),

        "são paulo,brazil": Coordinate(-23.5505, -46.6333),
        "rio de janeiro,brazil": Coordinate(-22.9068, -43.1729),
        "brasília,brazil": Coordinate(-15.8267, -47.9218),

        "mexico city,mexico": Coordinate(19.4326, -99.1332),
        "guadalajara,mexico": Coordinate(20.6597, -103.3496),
        "monterrey,mexico": Coordinate(25.6866, -100.3161),

        "rome,italy": Coordinate(41.9028, 12.4964),
        "milan,italy": Coordinate(45.4642, 9.1900),
        "naples,italy": Coordinate(40.8518, 14.2681),

        "madrid,spain": Coordinate(40.4168, -3.7038),
        "barcelona,spain": Coordinate(41.3851, 2.1734),
        "valencia,spain": Coordinate(39.4699, -0.3763),

        "amsterdam,netherlands": Coordinate(52.3676, 4.9041),
        "rotterdam,netherlands": Coordinate(51.9244, 4.4777),
        "the hague,netherlands": Coordinate(52.0705, 4.3007),

        # Major Asian cities
        "singapore,singapore": Coordinate(1.3521, 103.8198),
        "jurong,singapore": Coordinate(1.3404, 103.7090),
        "woodlands,singapore": Coordinate(1.4382, 103.7890),

        "kuala lumpur,malaysia": Coordinate(3.1390, 101.6869),
        "george town,malaysia": Coordinate(5.4164, 100.3327),
        "ipoh,malaysia": Coordinate(4.5975, 101.0901),

        "jakarta,indonesia": Coordinate(-6.2088, 106.8456),
        "surabaya,indonesia": Coordinate(-7.2575, 112.7521),
        "medan,indonesia": Coordinate(3.5952, 98.6722),

        "manila,philippines": Coordinate(14.5995, 120.9842),
        "quezon city,philippines": Coordinate(14.6760, 121.0437),
        "davao,philippines": Coordinate(7.1907, 125.4553),

        "ho chi minh city,vietnam": Coordinate(10.8231, 106.6297),
        "hanoi,vietnam": Coordinate(21.0285, 105.8542),
        "da nang,vietnam": Coordinate(16.0471, 108.2068),

        "dhaka,bangladesh": Coordinate(23.8103, 90.4125),
        "chittagong,bangladesh": Coordinate(22.3569, 91.7832),
        "sylhet,bangladesh": Coordinate(24.8949, 91.8687),

        "colombo,sri lanka": Coordinate(6.9271, 79.8612),
        "kandy,sri lanka": Coordinate(7.2906, 80.6337),
        "galle,sri lanka": Coordinate(6.0535, 80.2210),

        "kathmandu,nepal": Coordinate(27.7172, 85.3240),
        "pokhara,nepal": Coordinate(28.2096, 83.9856),
        "lalitpur,nepal": Coordinate(27.6588, 85.3247),

        # Middle East
        "dubai,uae": Coordinate(25.2048, 55.2708),
        "abu dhabi,uae": Coordinate(24.4539, 54.3773),
        "sharjah,uae": Coordinate(25.3463, 55.4209),

        "doha,qatar": Coordinate(25.2854, 51.5310),
        "al rayyan,qatar": Coordinate(25.2919, 51.4240),
        "umm salal,qatar": Coordinate(25.4057, 51.4064),

        "riyadh,saudi arabia": Coordinate(24.7136, 46.6753),
        "jeddah,saudi arabia": Coordinate(21.4858, 39.1925),
        "mecca,saudi arabia": Coordinate(21.3891, 39.8579),

        "tehran,iran": Coordinate(35.6892, 51.3890),
        "mashhad,iran": Coordinate(36.2605, 59.6168),
        "isfahan,iran": Coordinate(32.6539, 51.6660),

        "baghdad,iraq": Coordinate(33.3152, 44.3661),
        "basra,iraq": Coordinate(30.5088, 47.7804),
        "mosul,iraq": Coordinate(36.3350, 43.1189),

        "beirut,lebanon": Coordinate(33.8938, 35.5018),
        "tripoli,lebanon": Coordinate(34.4367, 35.8369),
        "sidon,lebanon": Coordinate(33.5633, 35.3689),

        "amman,jordan": Coordinate(31.9454, 35.9284),
        "zarqa,jordan": Coordinate(32.0727, 36.0888),
        "irbid,jordan": Coordinate(32.5556, 35.8500),

        "damascus,syria": Coordinate(33.5138, 36.2765),
        "aleppo,syria": Coordinate(36.2021, 37.1343),
        "homs,syria": Coordinate(34.7394, 36.7167),

        # Major African cities
        "cairo,egypt": Coordinate(30.0444, 31.2357),
        "alexandria,egypt": Coordinate(31.2001, 29.9187),
        "giza,egypt": Coordinate(30.0131, 31.2089),

        "lagos,nigeria": Coordinate(6.5244, 3.3792),
        "abuja,nigeria": Coordinate(9.0765, 7.3986),
        "kano,nigeria": Coordinate(12.0022, 8.5920),

        "cape town,south africa": Coordinate(-33.9249, 18.4241),
        "johannesburg,south africa": Coordinate(-26.2041, 28.0473),
        "durban,south africa": Coordinate(-29.8587, 31.0218),

        "casablanca,morocco": Coordinate(33.5731, -7.5898),
        "rabat,morocco": Coordinate(33.9716, -6.8498),
        "marrakech,morocco": Coordinate(31.6295, -7.9811),

        "nairobi,kenya": Coordinate(-1.2921, 36.8219),
        "mombasa,kenya": Coordinate(-4.0435, 39.6682),
        "kisumu,kenya": Coordinate(-0.0917, 34.7680),

        "addis ababa,ethiopia": Coordinate(9.1450, 40.4897),
        "dire dawa,ethiopia": Coordinate(9.5931, 41.8661),
        "mekelle,ethiopia": Coordinate(13.4967, 39.4753),

        # Oceania
        "auckland,new zealand": Coordinate(-36.8485, 174.7633),
        "wellington,new zealand": Coordinate(-41.2865, 174.7762),
        "christchurch,new zealand": Coordinate(-43.5321, 172.6362),

        "suva,fiji": Coordinate(-18.1248, 178.4501),
        "nadi,fiji": Coordinate(-17.7765, 177.4162),
        "lautoka,fiji": Coordinate(-17.6100, 177.4504),

        # Africa (general)
        "cairo,africa": Coordinate(30.0444, 31.2357),
        "lagos,africa": Coordinate(6.5244, 3.3792),
        "johannesburg,africa": Coordinate(-26.2041, 28.0473),

        # Middle East (general)
        "dubai,middle east": Coordinate(25.2048, 55.2708),
        "riyadh,middle east": Coordinate(24.7136, 46.6753),
        "tehran,middle east": Coordinate(35.6892, 51.3890),

        # Additional Asian cities
        "taipei,taiwan": Coordinate(25.0330, 121.5654),
        "kaohsiung,taiwan": Coordinate(22.6273, 120.3014),
        "taichung,taiwan": Coordinate(24.1477, 120.6736),

        "taipei,republic of china": Coordinate(25.0330, 121.5654),
        "kaohsiung,republic of china": Coordinate(22.6273, 120.3014),
        "taichung,republic of china": Coordinate(24.1477, 120.6736),

        "taipei,formosa": Coordinate(25.0330, 121.5654),
        "kaohsiung,formosa": Coordinate(22.6273, 120.3014),
        "taichung,formosa": Coordinate(24.1477, 120.6736),

        "vientiane,laos": Coordinate(17.9757, 102.6331),
        "luang prabang,laos": Coordinate(19.8845, 102.1348),
        "savannakhet,laos": Coordinate(16.5569, 104.7573),

        "vientiane,lao": Coordinate(17.9757, 102.6331),
        "luang prabang,lao": Coordinate(19.8845, 102.1348),
        "savannakhet,lao": Coordinate(16.5569, 104.7573),

        "phnom penh,kampuchea": Coordinate(11.5564, 104.9282),
        "siem reap,kampuchea": Coordinate(13.3671, 103.8448),
        "battambang,kampuchea": Coordinate(13.0957, 103.2028),

        "phnom penh,khmer republic": Coordinate(11.5564, 104.9282),
        "siem reap,khmer republic": Coordinate(13.3671, 103.8448),
        "battambang,khmer republic": Coordinate(13.0957, 103.2028),

        "yangon,burma": Coordinate(16.8661, 96.1951),
        "mandalay,burma": Coordinate(21.9588, 96.0891),
        "naypyidaw,burma": Coordinate(19.7633, 96.1078),

        "colombo,ceylon": Coordinate(6.9271, 79.8612),
        "kandy,ceylon": Coordinate(7.2906, 80.6337),
        "galle,ceylon": Coordinate(6.0535, 80.2210),

        "bangkok,siam": Coordinate(13.7563, 100.5018),
        "phuket,siam": Coordinate(7.8804, 98.3923),
        "chiang mai,siam": Coordinate(18.7883, 98.9853),

        "tehran,persia": Coordinate(35.6892, 51.3890),
        "mashhad,persia": Coordinate(36.2605, 59.6168),
        "isfahan,persia": Coordinate(32.6539, 51.6660),

        # North Korea
        "pyongyang,north korea": Coordinate(39.0392, 125.7625),
        "hamhung,north korea": Coordinate(39.9183, 127.5358),
        "chongjin,north korea": Coordinate(41.7956, 129.7756),

        "pyongyang,dprk": Coordinate(39.0392, 125.7625),
        "hamhung,dprk": Coordinate(39.9183, 127.5358),
        "chongjin,dprk": Coordinate(41.7956, 129.7756),

        "pyongyang,democratic people's republic of korea": Coordinate(39.0392, 125.7625),
        "hamhung,democratic people's republic of korea": Coordinate(39.9183, 127.5358),
        "chongjin,democratic people's republic of korea": Coordinate(41.7956, 129.7756),

        # Country aliases
        "seoul,korea": Coordinate(37.5665, 126.9780),
        "busan,korea": Coordinate(35.1796, 129.0756),
        "incheon,korea": Coordinate(37.4563, 126.7052),

        "seoul,republic of korea": Coordinate(37.5665, 126.9780),
        "busan,republic of korea": Coordinate(35.1796, 129.0756),
        "incheon,republic of korea": Coordinate(37.4563, 126.7052),

        "new york,america": Coordinate(40.7128, -74.0060),
        "los angeles,america": Coordinate(34.0522, -118.2437),
        "chicago,america": Coordinate(41.8781, -87.6298),

        "london,britain": Coordinate(51.5074, -0.1278),
        "manchester,britain": Coordinate(53.4808, -2.2426),
        "birmingham,britain": Coordinate(52.4862, -1.8904),

        "london,england": Coordinate(51.5074, -0.1278),
        "manchester,england": Coordinate(53.4808, -2.2426),
        "birmingham,england": Coordinate(52.4862, -1.8904),

        "amsterdam,holland": Coordinate(52.3676, 4.9041),
        "rotterdam,holland": Coordinate(51.9244, 4.4777),
        "the hague,holland": Coordinate(52.0705, 4.3007),

        "dubai,emirates": Coordinate(25.2048, 55.2708),
        "abu dhabi,emirates": Coordinate(24.4539, 54.3773),
        "sharjah,emirates": Coordinate(25.3463, 55.4209),

        "kinshasa,congo": Coordinate(-4.4419, 15.2663),
        "lubumbashi,congo": Coordinate(-11.6609, 27.4794),
        "mbuji-mayi,congo": Coordinate(-6.1360, 23.5900),

        "kinshasa,zaire": Coordinate(-4.4419, 15.2663),
        "lubumbashi,zaire": Coordinate(-11.6609, 27.4794),
        "mbuji-mayi,zaire": Coordinate(-6.1360, 23.5900),

        "moscow,soviet union": Coordinate(55.7558, 37.6176),
        "st. petersburg,soviet union": Coordinate(59.9311, 30.3609),
        "novosibirsk,soviet union": Coordinate(55.0084, 82.9357),

        "moscow,ussr": Coordinate(55.7558, 37.6176),
        "st. petersburg,ussr": Coordinate(59.9311, 30.3609),
        "novosibirsk,ussr": Coordinate(55.0084, 82.9357),

        # Southeast Asia (general)
        "bangkok,southeast asia": Coordinate(13.7563, 100.5018),
        "singapore,southeast asia": Coordinate(1.3521, 103.8198),
        "jakarta,southeast asia": Coordinate(-6.2088, 106.8456),

        # South Asia (general)
        "mumbai,south asia": Coordinate(19.0760, 72.8777),
        "delhi,south asia": Coordinate(28.7041, 77.1025),
        "dhaka,south asia": Coordinate(23.8103, 90.4125),

        # East Asia (general)
        "beijing,east asia": Coordinate(39.9042, 116.4074),
        "tokyo,east asia": Coordinate(35.6762, 139.6503),
        "seoul,east asia": Coordinate(37.5665, 126.9780),

        # Turkey
        "istanbul,turkey": Coordinate(41.0082, 28.9784),
        "ankara,turkey": Coordinate(39.9334, 32.8597),
        "izmir,turkey": Coordinate(38.4192, 27.1287),

        # Portugal
        "lisbon,portugal": Coordinate(38.7223, -9.1393),
        "porto,portugal": Coordinate(41.1579, -8.6291),

        # Malta and Cyprus
        "valletta,malta": Coordinate(35.8989, 14.5146),
        "birkirkara,malta": Coordinate(35.8972, 14.4611),
        "mosta,malta": Coordinate(35.9092, 14.4256),

        "nicosia,cyprus": Coordinate(35.1856, 33.3823),
        "limassol,cyprus": Coordinate(34.6851, 33.0299),
        "larnaca,cyprus": Coordinate(34.9208, 33.6249),

        # Caribbean territories
        "hamilton,bermuda": Coordinate(32.2949, -64.7820),
        "st. george's,bermuda": Coordinate(32.3783, -64.6722),
        "somerset,bermuda": Coordinate(32.2942, -64.8538),

        "oranjestad,aruba": Coordinate(12.5186, -70.0358),
        "san nicolas,aruba": Coordinate(12.4364, -69.9058),
        "noord,aruba": Coordinate(12.5669, -70.0428),

        "san juan,puerto rico": Coordinate(18.4655, -66.1057),
        "bayamón,puerto rico": Coordinate(18.3958, -66.1553),
        "carolina,puerto rico": Coordinate(18.3811, -65.9648),
    }
)


def coordinate_key(city: str, country: str) -> str:
    return f"{city.strip().lower()},{country.strip().lower()}"


def has_coordinate(city: str, country: str) -> bool:
    return coordinate_key(city, country) in CITY_COORDINATES


def coordinate_of(city: str, country: str) -> Coordinate:
    """Return the coordinate of ``city`` in ``country`` or the default one."""
    coordinate = CITY_COORDINATES.get(coordinate_key(city, country))
    if coordinate is None:
        logger.debug("No coordinate for %s, %s; using default", city, country)
        return DEFAULT_COORDINATE
    return coordinate


__all__ = ["CITY_COORDINATES", "DEFAULT_COORDINATE", "coordinate_key", "coordinate_of", "has_coordinate"]
