from typing import Any, List, Optional
from pydantic import BaseModel

class CadastroRequest(BaseModel):
    # Loosely typed: only presence is checked
    nome: Optional[Any] = None
    email: Optional[Any] = None
    senha: Optional[Any] = None
    origem: Optional[Any] = None

class CadastroResponse(BaseModel):
    usuarioId: int

class MensagemResponse(BaseModel):
    mensagem: str

class Pedido(BaseModel):
    id: int
    valor: float
    data: str

class PedidosResponse(BaseModel):
    pedidos: List[Pedido]

class ErroResponse(BaseModel):
    erro: str
