from .type_repository import TypeRepository
from .content_repository import ContentRepository, SaveAction
from .content_materializer import ContentMaterializer
from .import_job import ContentImportJob
