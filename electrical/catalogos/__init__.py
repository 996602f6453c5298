# API pública del dominio catalogos

from .adiciones import Adiciones, formatear_adiciones, parsear_adiciones
from .modelos import (
    POLOS_VALIDOS,
    Categoria,
    FilaAmpacidad,
    ModeloCatalogo,
    TipoCable,
    VarianteCatalogo,
)
from .catalogos import Catalogo, cargar_catalogo, construir_catalogo
from .catalogos_yaml import material_de_codigo

__all__ = [
    # modelos
    "POLOS_VALIDOS",
    "Categoria",
    "ModeloCatalogo",
    "VarianteCatalogo",
    "FilaAmpacidad",
    "TipoCable",

    # adiciones
    "Adiciones",
    "parsear_adiciones",
    "formatear_adiciones",

    # funciones catálogo
    "Catalogo",
    "cargar_catalogo",
    "construir_catalogo",
    "material_de_codigo",
]
