"""ISO 639-1 / ISO 639-2 language names for track labels."""

ISO639_1 = {
    'AA': 'Afar', 'AB': 'Abkhazian', 'AF': 'Afrikaans', 'AM': 'Amharic', 'AR': 'Arabic',
    'AS': 'Assamese', 'AZ': 'Azerbaijani', 'BE': 'Belarusian', 'BG': 'Bulgarian',
    'BN': 'Bengali', 'BO': 'Tibetan', 'BR': 'Breton', 'BS': 'Bosnian', 'CA': 'Catalan',
    'CS': 'Czech', 'CY': 'Welsh', 'DA': 'Danish', 'DE': 'German', 'EL': 'Greek',
    'EN': 'English', 'EO': 'Esperanto', 'ES': 'Spanish', 'ET': 'Estonian', 'EU': 'Basque',
    'FA': 'Persian', 'FI': 'Finnish', 'FO': 'Faroese', 'FR': 'French', 'GA': 'Irish',
    'GD': 'Gaelic', 'GL': 'Galician', 'GU': 'Gujarati', 'HE': 'Hebrew', 'HI': 'Hindi',
    'HR': 'Croatian', 'HU': 'Hungarian', 'HY': 'Armenian', 'ID': 'Indonesian',
    'IS': 'Icelandic', 'IT': 'Italian', 'JA': 'Japanese', 'JV': 'Javanese', 'KA': 'Georgian',
    'KK': 'Kazakh', 'KM': 'Central Khmer', 'KN': 'Kannada', 'KO': 'Korean', 'KU': 'Kurdish',
    'LA': 'Latin', 'LB': 'Luxembourgish', 'LO': 'Lao', 'LT': 'Lithuanian', 'LV': 'Latvian',
    'MK': 'Macedonian', 'ML': 'Malayalam', 'MN': 'Mongolian', 'MR': 'Marathi', 'MS': 'Malay',
    'MT': 'Maltese', 'MY': 'Burmese', 'NB': 'Norwegian Bokmal', 'NE': 'Nepali',
    'NL': 'Dutch', 'NN': 'Norwegian Nynorsk', 'NO': 'Norwegian', 'PA': 'Punjabi',
    'PL': 'Polish', 'PS': 'Pashto', 'PT': 'Portuguese', 'RO': 'Romanian', 'RU': 'Russian',
    'SI': 'Sinhala', 'SK': 'Slovak', 'SL': 'Slovenian', 'SO': 'Somali', 'SQ': 'Albanian',
    'SR': 'Serbian', 'SV': 'Swedish', 'SW': 'Swahili', 'TA': 'Tamil', 'TE': 'Telugu',
    'TG': 'Tajik', 'TH': 'Thai', 'TL': 'Tagalog', 'TR': 'Turkish', 'UK': 'Ukrainian',
    'UR': 'Urdu', 'UZ': 'Uzbek', 'VI': 'Vietnamese', 'YI': 'Yiddish', 'ZH': 'Chinese',
    'ZU': 'Zulu',
}

# Both bibliographic and terminology codes where they differ (e.g. GER/DEU).
ISO639_2 = {
    'AFR': 'Afrikaans', 'ALB': 'Albanian', 'SQI': 'Albanian', 'AMH': 'Amharic',
    'ARA': 'Arabic', 'ARM': 'Armenian', 'HYE': 'Armenian', 'AZE': 'Azerbaijani',
    'BAQ': 'Basque', 'EUS': 'Basque', 'BEL': 'Belarusian', 'BEN': 'Bengali',
    'BOS': 'Bosnian', 'BRE': 'Breton', 'BUL': 'Bulgarian', 'BUR': 'Burmese', 'MYA': 'Burmese',
    'CAT': 'Catalan', 'CHI': 'Chinese', 'ZHO': 'Chinese', 'HRV': 'Croatian', 'CZE': 'Czech',
    'CES': 'Czech', 'DAN': 'Danish', 'DUT': 'Dutch', 'NLD': 'Dutch', 'ENG': 'English',
    'EPO': 'Esperanto', 'EST': 'Estonian', 'FAO': 'Faroese', 'FIL': 'Filipino',
    'FIN': 'Finnish', 'FRE': 'French', 'FRA': 'French', 'GLG': 'Galician', 'GEO': 'Georgian',
    'KAT': 'Georgian', 'GER': 'German', 'DEU': 'German', 'GRE': 'Greek', 'ELL': 'Greek',
    'GUJ': 'Gujarati', 'HEB': 'Hebrew', 'HIN': 'Hindi', 'HUN': 'Hungarian',
    'ICE': 'Icelandic', 'ISL': 'Icelandic', 'IND': 'Indonesian', 'GLE': 'Irish',
    'ITA': 'Italian', 'JPN': 'Japanese', 'JAV': 'Javanese', 'KAN': 'Kannada',
    'KAZ': 'Kazakh', 'KHM': 'Central Khmer', 'KOR': 'Korean', 'KUR': 'Kurdish', 'LAO': 'Lao',
    'LAT': 'Latin', 'LAV': 'Latvian', 'LIT': 'Lithuanian', 'LTZ': 'Luxembourgish',
    'MAC': 'Macedonian', 'MKD': 'Macedonian', 'MAY': 'Malay', 'MSA': 'Malay',
    'MAL': 'Malayalam', 'MLT': 'Maltese', 'MAR': 'Marathi', 'MON': 'Mongolian',
    'NEP': 'Nepali', 'NOR': 'Norwegian', 'NOB': 'Norwegian Bokmal', 'NNO': 'Norwegian Nynorsk',
    'PAN': 'Punjabi', 'PER': 'Persian', 'FAS': 'Persian', 'POL': 'Polish',
    'POR': 'Portuguese', 'PUS': 'Pashto', 'RUM': 'Romanian', 'RON': 'Romanian',
    'RUS': 'Russian', 'SCC': 'Serbian', 'SRP': 'Serbian', 'SIN': 'Sinhala', 'SLO': 'Slovak',
    'SLK': 'Slovak', 'SLV': 'Slovenian', 'SOM': 'Somali', 'SPA': 'Spanish', 'SWA': 'Swahili',
    'SWE': 'Swedish', 'TGL': 'Tagalog', 'TGK': 'Tajik', 'TAM': 'Tamil', 'TEL': 'Telugu',
    'THA': 'Thai', 'TIB': 'Tibetan', 'BOD': 'Tibetan', 'TUR': 'Turkish', 'UKR': 'Ukrainian',
    'URD': 'Urdu', 'UZB': 'Uzbek', 'VIE': 'Vietnamese', 'WEL': 'Welsh', 'CYM': 'Welsh',
    'YID': 'Yiddish', 'ZUL': 'Zulu',
    'UND': 'Undetermined', 'MUL': 'Multiple languages', 'ZXX': 'No linguistic content',
}


def language_name(code) -> str | None:
    """Full language name for a 2 or 3 letter code, or None when unknown."""
    key = str(code or '').strip().upper()
    if len(key) == 2:
        return ISO639_1.get(key)
    if len(key) == 3:
        return ISO639_2.get(key)
    return None
