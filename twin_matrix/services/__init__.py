from twin_matrix.services.matrix_view_service import MatrixViewService

__all__ = ["MatrixViewService"]
