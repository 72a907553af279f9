"""
Configuration — variables d'environnement lues au chargement du module.

SECTION_BUILDER_ORIGIN             origine publique utilisée pour les URLs d'assets du preview
SECTION_BUILDER_MOBILE_BREAKPOINT  largeur (px) sous laquelle le scroll pleine page est désactivé
SECTION_BUILDER_FONTS_URL          feuille Google Fonts injectée dans le preview
SECTION_BUILDER_RUNTIME_JS         script client par défaut pour l'export packagé
"""
import os

ORIGIN = os.getenv("SECTION_BUILDER_ORIGIN", "").rstrip("/")

MOBILE_BREAKPOINT = int(os.getenv("SECTION_BUILDER_MOBILE_BREAKPOINT", "500"))

FONTS_URL = os.getenv(
    "SECTION_BUILDER_FONTS_URL",
    "https://fonts.googleapis.com/css?family=Lato|Heebo|PT+Serif|Montserrat:400,500"
    "|Roboto:400,700|Cinzel:400,700|IBM+Plex+Sans:400,600|IBM+Plex+Mono:400,600&amp;subset=cyrillic",
)

RUNTIME_JS = os.getenv("SECTION_BUILDER_RUNTIME_JS", "./../js/cjs.js")

JQUERY_URL = "https://ajax.googleapis.com/ajax/libs/jquery/3.3.1/jquery.min.js"
