"""Static label text for the form and the preview in both languages."""

from typing import Dict
from cvstudio.models.ui_models import Language


LABELS: Dict[Language, Dict[str, str]] = {
    Language.TR: {
        "cv_information": "CV Bilgileri",
        "full_name": "Ad Soyad",
        "job_title": "Meslek",
        "email": "E-posta",
        "phone": "Telefon",
        "profile": "Profil",
        "skills": "Yetenekler",
        "new_skill": "Yeni yetenek ekle",
        "add": "Ekle",
        "education": "Eğitim",
        "school": "Okul/Üniversite",
        "degree": "Derece",
        "year": "Yıl",
        "add_education": "Eğitim Ekle",
        "experience": "Deneyim",
        "company": "Şirket",
        "position": "Pozisyon",
        "description": "Açıklama",
        "add_experience": "Deneyim Ekle",
        "references": "Referanslar",
        "reference": "Referans",
        "name": "İsim",
        "contact": "İletişim",
        "add_reference": "Referans Ekle",
        "photo": "Fotoğraf",
        "photo_alt": "Profil",
        "theme": "Tema",
        "language": "Dil",
        "dark_mode": "Karanlık Mod",
        "preview": "Önizleme",
        "download": "İndir",
        "prepare_download": "PNG Oluştur",
        "export_failed": "Görüntü oluşturulamadı",
        "photo_failed": "Fotoğraf yüklenemedi",
    },
    Language.EN: {
        "cv_information": "CV Information",
        "full_name": "Full Name",
        "job_title": "Job Title",
        "email": "Email",
        "phone": "Phone",
        "profile": "Profile",
        "skills": "Skills",
        "new_skill": "Add new skill",
        "add": "Add",
        "education": "Education",
        "school": "School/University",
        "degree": "Degree",
        "year": "Year",
        "add_education": "Add Education",
        "experience": "Experience",
        "company": "Company",
        "position": "Position",
        "description": "Description",
        "add_experience": "Add Experience",
        "references": "References",
        "reference": "Reference",
        "name": "Name",
        "contact": "Contact",
        "add_reference": "Add Reference",
        "photo": "Photo",
        "photo_alt": "Profile",
        "theme": "Theme",
        "language": "Language",
        "dark_mode": "Dark Mode",
        "preview": "Preview",
        "download": "Download",
        "prepare_download": "Create PNG",
        "export_failed": "Could not create the image",
        "photo_failed": "Could not load the photo",
    },
}


def get_labels(language) -> Dict[str, str]:
    """
    Get the label table for a language.

    Args:
        language: Language enum member or code ('tr' or 'en')

    Returns:
        Dict[str, str]: Label key to display text

    Raises:
        ValueError: If the language is not supported
    """
    return LABELS[Language(language)]
