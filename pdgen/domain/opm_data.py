"""
domain/opm_data.py
──────────────────────────────────────────────────────────────────────────────
Built-in OPM white-collar occupational groups and series.

Source: OPM Handbook of Occupational Groups and Families.  Records are kept
flat (series carry their group code) so services/catalog.py can verify every
reference at load time.  Order here is display order.

To use a different reference set, point TAXONOMY_CSV_PATH at a CSV with
columns group_code, group_title, series_code, series_title.
"""
from __future__ import annotations

# (code, title)
OCCUPATIONAL_GROUPS: tuple[tuple[str, str], ...] = (
    ("0000", "Miscellaneous Occupations"),
    ("0100", "Social Science, Psychology, and Welfare"),
    ("0200", "Human Resources Management"),
    ("0300", "General Administrative, Clerical, and Office Services"),
    ("0400", "Natural Resources Management and Biological Sciences"),
    ("0500", "Accounting and Budget"),
    ("0600", "Medical, Hospital, Dental, and Public Health"),
    ("0700", "Veterinary Medical Science"),
    ("0800", "Engineering and Architecture"),
    ("0900", "Legal and Kindred"),
    ("1000", "Information and Arts"),
    ("1100", "Business and Industry"),
    ("1200", "Copyright, Patent, and Trademark"),
    ("1300", "Physical Sciences"),
    ("1400", "Library and Archives"),
    ("1500", "Mathematical Sciences"),
    ("1600", "Equipment, Facilities, and Services"),
    ("1700", "Education"),
    ("1800", "Inspection, Investigation, Enforcement, and Compliance"),
    ("1900", "Quality Assurance, Inspection, and Grading"),
    ("2000", "Supply"),
    ("2100", "Transportation"),
    ("2200", "Information Technology"),
)

# (code, title, group_code)
SERIES: tuple[tuple[str, str, str], ...] = (
    # ── 0000 ───────────────────────────────────────────────────────────────
    ("0006", "Correctional Institution Administration", "0000"),
    ("0007", "Correctional Officer", "0000"),
    ("0018", "Safety and Occupational Health Management", "0000"),
    ("0019", "Safety Technician", "0000"),
    ("0020", "Community Planning", "0000"),
    ("0021", "Community Planning Technician", "0000"),
    ("0023", "Outdoor Recreation Planning", "0000"),
    ("0025", "Park Ranger", "0000"),
    ("0028", "Environmental Protection Specialist", "0000"),
    ("0029", "Environmental Protection Assistant", "0000"),
    ("0030", "Sports Specialist", "0000"),
    ("0050", "Funeral Directing", "0000"),
    ("0060", "Chaplain", "0000"),
    ("0062", "Clothing Design", "0000"),
    ("0072", "Fingerprint Identification", "0000"),
    ("0080", "Security Administration", "0000"),
    ("0083", "Police", "0000"),
    ("0084", "Nuclear Materials Courier", "0000"),
    ("0085", "Security Guard", "0000"),
    ("0086", "Security Clerical and Assistance", "0000"),
    ("0090", "Guide", "0000"),
    ("0095", "Foreign Law Specialist", "0000"),
    ("0099", "General Student Trainee", "0000"),
    # ── 0100 ───────────────────────────────────────────────────────────────
    ("0101", "Social Science", "0100"),
    ("0102", "Social Science Aid and Technician", "0100"),
    ("0110", "Economist", "0100"),
    ("0130", "Foreign Affairs", "0100"),
    ("0131", "International Relations", "0100"),
    ("0132", "Intelligence", "0100"),
    ("0134", "Intelligence Aid and Clerk", "0100"),
    ("0135", "Foreign Agricultural Affairs", "0100"),
    ("0136", "International Cooperation", "0100"),
    ("0140", "Workforce Research and Analysis", "0100"),
    ("0150", "Geography", "0100"),
    ("0160", "Civil Rights Analysis", "0100"),
    ("0170", "History", "0100"),
    ("0180", "Psychology", "0100"),
    ("0181", "Psychology Aid and Technician", "0100"),
    ("0184", "Sociology", "0100"),
    ("0185", "Social Work", "0100"),
    ("0186", "Social Services Aid and Assistant", "0100"),
    ("0187", "Social Services", "0100"),
    ("0188", "Recreation Specialist", "0100"),
    ("0189", "Recreation Aid and Assistant", "0100"),
    ("0190", "General Anthropology", "0100"),
    ("0193", "Archeology", "0100"),
    # ── 0200 ───────────────────────────────────────────────────────────────
    ("0201", "Human Resources Management", "0200"),
    ("0203", "Human Resources Assistance", "0200"),
    ("0241", "Mediation", "0200"),
    ("0243", "Apprenticeship and Training", "0200"),
    ("0244", "Labor Management Relations Examining", "0200"),
    ("0260", "Equal Employment Opportunity", "0200"),
    # ── 0300 ───────────────────────────────────────────────────────────────
    ("0301", "Miscellaneous Administration and Program", "0300"),
    ("0302", "Messenger", "0300"),
    ("0303", "Miscellaneous Clerk and Assistant", "0300"),
    ("0304", "Information Receptionist", "0300"),
    ("0305", "Mail and File", "0300"),
    ("0309", "Correspondence Clerk", "0300"),
    ("0312", "Clerk-Stenographer and Reporter", "0300"),
    ("0318", "Secretary", "0300"),
    ("0319", "Closed Microphone Reporting", "0300"),
    ("0326", "Office Automation Clerical and Assistance", "0300"),
    ("0332", "Computer Operation", "0300"),
    ("0335", "Computer Clerk and Assistant", "0300"),
    ("0340", "Program Management", "0300"),
    ("0341", "Administrative Officer", "0300"),
    ("0342", "Support Services Administration", "0300"),
    ("0343", "Management and Program Analysis", "0300"),
    ("0344", "Management and Program Clerical and Assistance", "0300"),
    ("0346", "Logistics Management", "0300"),
    ("0350", "Equipment Operator", "0300"),
    ("0356", "Data Transcriber", "0300"),
    ("0357", "Coding", "0300"),
    ("0360", "Equal Opportunity Compliance", "0300"),
    ("0361", "Equal Opportunity Assistance", "0300"),
    ("0382", "Telephone Operating", "0300"),
    ("0390", "Telecommunications Processing", "0300"),
    ("0391", "Telecommunications", "0300"),
    ("0394", "Communications Clerical", "0300"),
    # ── 0400 ───────────────────────────────────────────────────────────────
    ("0401", "General Natural Resources Management and Biological Sciences", "0400"),
    ("0403", "Microbiology", "0400"),
    ("0404", "Biological Science Technician", "0400"),
    ("0405", "Pharmacology", "0400"),
    ("0408", "Ecology", "0400"),
    ("0410", "Zoology", "0400"),
    ("0413", "Physiology", "0400"),
    ("0414", "Entomology", "0400"),
    ("0415", "Toxicology", "0400"),
    ("0421", "Plant Protection Technician", "0400"),
    ("0430", "Botany", "0400"),
    ("0434", "Plant Pathology", "0400"),
    ("0435", "Plant Physiology", "0400"),
    ("0436", "Plant Protection and Quarantine", "0400"),
    ("0437", "Horticulture", "0400"),
    ("0440", "Genetics", "0400"),
    ("0454", "Rangeland Management", "0400"),
    ("0455", "Range Technician", "0400"),
    ("0457", "Soil Conservation", "0400"),
    ("0458", "Soil Conservation Technician", "0400"),
    ("0459", "Irrigation System Operation", "0400"),
    ("0460", "Forestry", "0400"),
    ("0462", "Forestry Technician", "0400"),
    ("0470", "Soil Science", "0400"),
    ("0471", "Agronomy", "0400"),
    ("0480", "General Fish and Wildlife Administration", "0400"),
    ("0482", "Fish Biology", "0400"),
    ("0485", "Wildlife Refuge Management", "0400"),
    ("0486", "Wildlife Biology", "0400"),
    ("0487", "Animal Science", "0400"),
    # ── 0500 ───────────────────────────────────────────────────────────────
    ("0501", "Financial Administration and Program", "0500"),
    ("0503", "Financial Clerical and Assistance", "0500"),
    ("0505", "Financial Management", "0500"),
    ("0510", "Accounting", "0500"),
    ("0511", "Auditing", "0500"),
    ("0512", "Internal Revenue Agent", "0500"),
    ("0525", "Accounting Technician", "0500"),
    ("0526", "Tax Specialist", "0500"),
    ("0530", "Cash Processing", "0500"),
    ("0540", "Voucher Examining", "0500"),
    ("0544", "Civilian Pay", "0500"),
    ("0545", "Military Pay", "0500"),
    ("0560", "Budget Analysis", "0500"),
    ("0561", "Budget Clerical and Assistance", "0500"),
    ("0592", "Tax Examining", "0500"),
    ("0593", "Insurance Accounts", "0500"),
    # ── 0600 ───────────────────────────────────────────────────────────────
    ("0601", "General Health Science", "0600"),
    ("0602", "Medical Officer", "0600"),
    ("0603", "Physician's Assistant", "0600"),
    ("0610", "Nurse", "0600"),
    ("0620", "Practical Nurse", "0600"),
    ("0621", "Nursing Assistant", "0600"),
    ("0622", "Medical Supply Aide and Technician", "0600"),
    ("0625", "Autopsy Assistant", "0600"),
    ("0630", "Dietitian and Nutritionist", "0600"),
    ("0631", "Occupational Therapist", "0600"),
    ("0633", "Physical Therapist", "0600"),
    ("0635", "Kinesiotherapy", "0600"),
    ("0636", "Rehabilitation Therapy Assistant", "0600"),
    ("0637", "Manual Arts Therapist", "0600"),
    ("0638", "Recreation/Creative Arts Therapist", "0600"),
    ("0639", "Educational Therapist", "0600"),
    ("0640", "Health Aid and Technician", "0600"),
    ("0642", "Nuclear Medicine Technician", "0600"),
    ("0644", "Medical Technologist", "0600"),
    ("0645", "Medical Technician", "0600"),
    ("0646", "Pathology Technician", "0600"),
    ("0647", "Diagnostic Radiologic Technologist", "0600"),
    ("0648", "Therapeutic Radiologic Technologist", "0600"),
    ("0649", "Medical Instrument Technician", "0600"),
    ("0651", "Respiratory Therapist", "0600"),
    ("0660", "Pharmacist", "0600"),
    ("0661", "Pharmacy Technician", "0600"),
    ("0662", "Optometrist", "0600"),
    ("0664", "Restoration Technician", "0600"),
    ("0665", "Speech Pathology and Audiology", "0600"),
    ("0667", "Orthotist and Prosthetist", "0600"),
    ("0668", "Podiatrist", "0600"),
    ("0669", "Medical Records Administration", "0600"),
    ("0670", "Health System Administration", "0600"),
    ("0671", "Health System Specialist", "0600"),
    ("0672", "Prosthetic Representative", "0600"),
    ("0673", "Hospital Housekeeping Management", "0600"),
    ("0675", "Medical Records Technician", "0600"),
    ("0679", "Medical Support Assistance", "0600"),
    ("0680", "Dental Officer", "0600"),
    ("0681", "Dental Assistant", "0600"),
    ("0682", "Dental Hygiene", "0600"),
    ("0683", "Dental Laboratory Aid and Technician", "0600"),
    ("0685", "Public Health Program Specialist", "0600"),
    ("0688", "Sanitarian", "0600"),
    ("0690", "Industrial Hygiene", "0600"),
    ("0696", "Consumer Safety", "0600"),
    ("0698", "Environmental Health Technician", "0600"),
    ("0699", "Medical and Health Student Trainee", "0600"),
    # ── 0700 ───────────────────────────────────────────────────────────────
    ("0701", "Veterinary Medical Science", "0700"),
    ("0704", "Animal Health Technician", "0700"),
    # ── 0800 ───────────────────────────────────────────────────────────────
    ("0801", "General Engineering", "0800"),
    ("0802", "Engineering Technical", "0800"),
    ("0803", "Safety Engineering", "0800"),
    ("0804", "Fire Protection Engineering", "0800"),
    ("0806", "Materials Engineering", "0800"),
    ("0807", "Landscape Architecture", "0800"),
    ("0808", "Architecture", "0800"),
    ("0809", "Construction Control Technical", "0800"),
    ("0810", "Civil Engineering", "0800"),
    ("0817", "Survey Technical", "0800"),
    ("0819", "Environmental Engineering", "0800"),
    ("0830", "Mechanical Engineering", "0800"),
    ("0840", "Nuclear Engineering", "0800"),
    ("0850", "Electrical Engineering", "0800"),
    ("0854", "Computer Engineering", "0800"),
    ("0855", "Electronics Engineering", "0800"),
    ("0856", "Electronics Technical", "0800"),
    ("0858", "Biomedical Engineering", "0800"),
    ("0861", "Aerospace Engineering", "0800"),
    ("0871", "Naval Architecture", "0800"),
    ("0873", "Ship Surveying", "0800"),
    ("0880", "Mining Engineering", "0800"),
    ("0881", "Petroleum Engineering", "0800"),
    ("0890", "Agricultural Engineering", "0800"),
    ("0892", "Ceramic Engineering", "0800"),
    ("0893", "Chemical Engineering", "0800"),
    ("0894", "Welding Engineering", "0800"),
    ("0895", "Industrial Engineering Technical", "0800"),
    ("0896", "Industrial Engineering", "0800"),
    ("0899", "Engineering and Architecture Student Trainee", "0800"),
    # ── 0900 ───────────────────────────────────────────────────────────────
    ("0904", "Law Clerk", "0900"),
    ("0905", "General Attorney", "0900"),
    ("0930", "Hearings and Appeals", "0900"),
    ("0935", "Administrative Law Judge", "0900"),
    ("0945", "Clerk of Court", "0900"),
    ("0950", "Paralegal Specialist", "0900"),
    ("0958", "Employee Benefits Law", "0900"),
    ("0962", "Contact Representative", "0900"),
    ("0963", "Legal Instruments Examining", "0900"),
    ("0965", "Land Law Examining", "0900"),
    ("0967", "Passport and Visa Examining", "0900"),
    ("0986", "Legal Assistance", "0900"),
    ("0987", "Tax Law Specialist", "0900"),
    ("0991", "Workers' Compensation Claims Examining", "0900"),
    ("0993", "Railroad Retirement Claims Examining", "0900"),
    ("0996", "Veterans Claims Examining", "0900"),
    ("0998", "Claims Assistance and Examining", "0900"),
    # ── 1000 ───────────────────────────────────────────────────────────────
    ("1001", "General Arts and Information", "1000"),
    ("1008", "Interior Design", "1000"),
    ("1010", "Exhibits Specialist", "1000"),
    ("1015", "Museum Curator", "1000"),
    ("1016", "Museum Specialist and Technician", "1000"),
    ("1020", "Illustrating", "1000"),
    ("1035", "Public Affairs", "1000"),
    ("1040", "Language Specialist", "1000"),
    ("1046", "Language Clerical", "1000"),
    ("1051", "Music Specialist", "1000"),
    ("1054", "Theater Specialist", "1000"),
    ("1056", "Art Specialist", "1000"),
    ("1060", "Photography", "1000"),
    ("1071", "Audiovisual Production", "1000"),
    ("1082", "Writing and Editing", "1000"),
    ("1083", "Technical Writing and Editing", "1000"),
    ("1084", "Visual Information", "1000"),
    ("1087", "Editorial Assistance", "1000"),
    # ── 1100 ───────────────────────────────────────────────────────────────
    ("1101", "General Business and Industry", "1100"),
    ("1102", "Contracting", "1100"),
    ("1103", "Industrial Property Management", "1100"),
    ("1104", "Property Disposal", "1100"),
    ("1105", "Purchasing", "1100"),
    ("1106", "Procurement Clerical and Technician", "1100"),
    ("1107", "Property Disposal Clerical and Technician", "1100"),
    ("1130", "Public Utilities Specialist", "1100"),
    ("1140", "Trade Specialist", "1100"),
    ("1144", "Commissary Management", "1100"),
    ("1145", "Agricultural Program Specialist", "1100"),
    ("1146", "Agricultural Marketing", "1100"),
    ("1147", "Agricultural Market Reporting", "1100"),
    ("1150", "Industrial Specialist", "1100"),
    ("1152", "Production Control", "1100"),
    ("1160", "Financial Analysis", "1100"),
    ("1163", "Insurance Examining", "1100"),
    ("1165", "Loan Specialist", "1100"),
    ("1169", "Internal Revenue Officer", "1100"),
    ("1170", "Realty", "1100"),
    ("1171", "Appraising", "1100"),
    ("1173", "Housing Management", "1100"),
    ("1176", "Building Management", "1100"),
    # ── 1200 ───────────────────────────────────────────────────────────────
    ("1202", "Patent Technician", "1200"),
    ("1210", "Copyright", "1200"),
    ("1220", "Patent Administration", "1200"),
    ("1222", "Patent Attorney", "1200"),
    ("1223", "Patent Classifying", "1200"),
    ("1224", "Patent Examining", "1200"),
    ("1226", "Design Patent Examining", "1200"),
    # ── 1300 ───────────────────────────────────────────────────────────────
    ("1301", "General Physical Science", "1300"),
    ("1306", "Health Physics", "1300"),
    ("1310", "Physics", "1300"),
    ("1311", "Physical Science Technician", "1300"),
    ("1313", "Geophysics", "1300"),
    ("1315", "Hydrology", "1300"),
    ("1316", "Hydrologic Technician", "1300"),
    ("1320", "Chemistry", "1300"),
    ("1321", "Metallurgy", "1300"),
    ("1330", "Astronomy and Space Science", "1300"),
    ("1340", "Meteorology", "1300"),
    ("1341", "Meteorological Technician", "1300"),
    ("1350", "Geology", "1300"),
    ("1360", "Oceanography", "1300"),
    ("1361", "Navigational Information", "1300"),
    ("1370", "Cartography", "1300"),
    ("1371", "Cartographic Technician", "1300"),
    ("1372", "Geodesy", "1300"),
    ("1373", "Land Surveying", "1300"),
    ("1374", "Geodetic Technician", "1300"),
    ("1380", "Forest Products Technology", "1300"),
    ("1382", "Food Technology", "1300"),
    ("1384", "Textile Technology", "1300"),
    ("1386", "Photographic Technology", "1300"),
    # ── 1400 ───────────────────────────────────────────────────────────────
    ("1410", "Librarian", "1400"),
    ("1411", "Library Technician", "1400"),
    ("1412", "Technical Information Services", "1400"),
    ("1420", "Archivist", "1400"),
    ("1421", "Archives Technician", "1400"),
    # ── 1500 ───────────────────────────────────────────────────────────────
    ("1501", "General Mathematics and Statistics", "1500"),
    ("1510", "Actuarial Science", "1500"),
    ("1515", "Operations Research", "1500"),
    ("1520", "Mathematics", "1500"),
    ("1521", "Mathematics Technician", "1500"),
    ("1529", "Mathematical Statistics", "1500"),
    ("1530", "Statistics", "1500"),
    ("1531", "Statistical Assistant", "1500"),
    ("1550", "Computer Science", "1500"),
    ("1560", "Data Science", "1500"),
    # ── 1600 ───────────────────────────────────────────────────────────────
    ("1601", "Equipment, Facilities, and Services", "1600"),
    ("1603", "Equipment, Facilities, and Services Assistance", "1600"),
    ("1630", "Cemetery Administration Services", "1600"),
    ("1640", "Facility Operations Services", "1600"),
    ("1654", "Printing Services", "1600"),
    ("1658", "Laundry Operations Services", "1600"),
    ("1667", "Food Services", "1600"),
    ("1670", "Equipment Services", "1600"),
    # ── 1700 ───────────────────────────────────────────────────────────────
    ("1701", "General Education and Training", "1700"),
    ("1702", "Education and Training Technician", "1700"),
    ("1710", "Education and Vocational Training", "1700"),
    ("1712", "Training Instruction", "1700"),
    ("1715", "Vocational Rehabilitation", "1700"),
    ("1720", "Education Program", "1700"),
    ("1740", "Education Services", "1700"),
    ("1750", "Instructional Systems", "1700"),
    # ── 1800 ───────────────────────────────────────────────────────────────
    ("1801", "General Inspection, Investigation, Enforcement, and Compliance", "1800"),
    ("1802", "Compliance Inspection and Support", "1800"),
    ("1810", "General Investigation", "1800"),
    ("1811", "Criminal Investigation", "1800"),
    ("1815", "Air Safety Investigating", "1800"),
    ("1822", "Mine Safety and Health", "1800"),
    ("1825", "Aviation Safety", "1800"),
    ("1849", "Wage and Hour Investigation", "1800"),
    ("1850", "Agricultural Warehouse Inspection", "1800"),
    ("1854", "Alcohol, Tobacco and Firearms Inspection", "1800"),
    ("1862", "Consumer Safety Inspection", "1800"),
    ("1863", "Food Inspection", "1800"),
    ("1881", "Customs and Border Protection Interdiction", "1800"),
    ("1889", "Import Specialist", "1800"),
    ("1890", "Customs Inspection", "1800"),
    ("1894", "Customs Entry and Liquidating", "1800"),
    ("1895", "Customs and Border Protection", "1800"),
    ("1896", "Border Patrol Enforcement", "1800"),
    # ── 1900 ───────────────────────────────────────────────────────────────
    ("1910", "Quality Assurance", "1900"),
    ("1980", "Agricultural Commodity Grading", "1900"),
    ("1981", "Agricultural Commodity Aid", "1900"),
    # ── 2000 ───────────────────────────────────────────────────────────────
    ("2001", "General Supply", "2000"),
    ("2003", "Supply Program Management", "2000"),
    ("2005", "Supply Clerical and Technician", "2000"),
    ("2010", "Inventory Management", "2000"),
    ("2030", "Distribution Facilities and Storage Management", "2000"),
    ("2032", "Packaging", "2000"),
    ("2091", "Sales Store Clerical", "2000"),
    # ── 2100 ───────────────────────────────────────────────────────────────
    ("2101", "Transportation Specialist", "2100"),
    ("2102", "Transportation Clerk and Assistant", "2100"),
    ("2110", "Transportation Industry Analysis", "2100"),
    ("2121", "Railroad Safety", "2100"),
    ("2123", "Motor Carrier Safety", "2100"),
    ("2125", "Highway Safety", "2100"),
    ("2130", "Traffic Management", "2100"),
    ("2131", "Freight Rate", "2100"),
    ("2135", "Transportation Loss and Damage Claims Examining", "2100"),
    ("2144", "Cargo Scheduling", "2100"),
    ("2150", "Transportation Operations", "2100"),
    ("2151", "Dispatching", "2100"),
    ("2152", "Air Traffic Control", "2100"),
    ("2154", "Air Traffic Assistance", "2100"),
    ("2161", "Marine Cargo", "2100"),
    ("2181", "Aircraft Operation", "2100"),
    ("2183", "Air Navigation", "2100"),
    ("2185", "Aircrew Technician", "2100"),
    # ── 2200 ───────────────────────────────────────────────────────────────
    ("2210", "Information Technology Management", "2200"),
    ("2299", "Information Technology Student Trainee", "2200"),
)
