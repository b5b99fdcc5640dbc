import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from harness.core import state_machine as sm
from harness.core.models import TRANSPORT, OperationOutcome
from harness.observability.logging import log
from harness.runner.client import DEFAULT_CADASTRO, ApiClient
from harness.runner.reporter import ResultReporter

SENDING = "Enviando requisição..."
TRANSPORT_MESSAGE = "Falha na comunicação com o servidor"


@dataclass(frozen=True)
class Step:
    key: str
    stage: str            # used in the abort message: "falha na etapa de <stage>"
    started_title: str
    success_title: str
    error_title: str
    transport_title: str


REGISTER = Step(
    key="register",
    stage="cadastro",
    started_title="Iniciando Cadastro de Usuário",
    success_title="Cadastro Realizado com Sucesso",
    error_title="Erro no Cadastro",
    transport_title="Erro na Requisição de Cadastro",
)
LOGIN = Step(
    key="login",
    stage="login",
    started_title="Iniciando Login",
    success_title="Login Realizado com Sucesso",
    error_title="Erro no Login",
    transport_title="Erro na Requisição de Login",
)
UPDATE = Step(
    key="update",
    stage="alteração de dados",
    started_title="Iniciando Alteração de Dados",
    success_title="Dados Alterados com Sucesso",
    error_title="Erro na Alteração de Dados",
    transport_title="Erro na Requisição de Alteração",
)
LIST_ORDERS = Step(
    key="list",
    stage="listagem de pedidos",
    started_title="Iniciando Listagem de Pedidos",
    success_title="Pedidos Listados com Sucesso",
    error_title="Erro na Listagem de Pedidos",
    transport_title="Erro na Requisição de Listagem",
)


@dataclass(frozen=True)
class Flow:
    key: str
    label: str
    steps: Tuple[Step, ...]
    # Only the full lifecycle ends with an "all steps passed" record
    summary: bool = False


FLOWS: Dict[str, Flow] = {
    "cadastro": Flow("cadastro", "Cadastro", (REGISTER,)),
    "login": Flow("login", "Login", (REGISTER, LOGIN)),
    "edicao": Flow("edicao", "Edição", (REGISTER, LOGIN, UPDATE)),
    "listagem": Flow("listagem", "Listagem", (REGISTER, LOGIN, UPDATE, LIST_ORDERS), summary=True),
}


@dataclass
class FlowState:
    identifier: Optional[int] = None
    status: str = sm.IDLE
    flow: Optional[str] = None
    failed_stage: Optional[str] = None


class FlowOrchestrator:
    """
    Runs one named flow at a time against the mock API.

    Steps execute strictly in order because every step after registration
    needs the usuarioId it returns. The first failed step ends the run: an
    abort record is reported and nothing after it is called. Each run starts
    from a clean state and registers a fresh user.
    """

    def __init__(self, client: ApiClient, reporter: ResultReporter, dados_cadastro=None):
        self.client = client
        self.reporter = reporter
        self.dados_cadastro = dict(dados_cadastro or DEFAULT_CADASTRO)
        self.state = FlowState()
        self._calls: Dict[str, Callable[[], OperationOutcome]] = {
            REGISTER.key: lambda: self.client.register(self.dados_cadastro),
            LOGIN.key: lambda: self.client.login(self.state.identifier),
            UPDATE.key: lambda: self.client.update(self.state.identifier),
            LIST_ORDERS.key: lambda: self.client.list_orders(self.state.identifier),
        }

    def reset(self) -> None:
        self.reporter.clear()
        self.state = FlowState()

    def _transition(self, target: str) -> None:
        self.state.status = sm.check_transition(self.state.status, target)

    def _request_echo(self, step: Step) -> dict:
        if step is REGISTER:
            return dict(self.dados_cadastro)
        return {"usuarioId": self.state.identifier}

    def _report_outcome(self, step: Step, outcome: OperationOutcome) -> None:
        request = self._request_echo(step)
        if outcome.ok:
            self.reporter.report(
                step.success_title,
                {"status": outcome.status_code, "data": outcome.payload, "request": request},
            )
        elif outcome.kind == TRANSPORT:
            self.reporter.report(
                step.transport_title,
                {"error": {"erro": TRANSPORT_MESSAGE, "detail": outcome.message}, "request": request},
                success=False,
            )
        else:
            self.reporter.report(
                step.error_title,
                {"status": outcome.status_code, "error": outcome.to_body(), "request": request},
                success=False,
            )

    def _run_step(self, step: Step) -> OperationOutcome:
        self.reporter.report(step.started_title, SENDING)
        outcome = self._calls[step.key]()
        self._report_outcome(step, outcome)
        if outcome.ok and step is REGISTER:
            self.state.identifier = int(outcome.payload["usuarioId"])
        log(
            "flow_step",
            flow=self.state.flow,
            step=step.key,
            ok=outcome.ok,
            statusCode=outcome.status_code,
            kind=getattr(outcome, "kind", None),
        )
        return outcome

    def _abort(self, flow: Flow, step: Step) -> FlowState:
        self.reporter.report(
            f"Fluxo de {flow.label} Abortado",
            f"O teste foi interrompido devido a falha na etapa de {step.stage}.",
            success=False,
        )
        self.state.failed_stage = step.stage
        self._transition(sm.FAILED)
        return self.state

    def run(self, flow_name: str) -> FlowState:
        flow = FLOWS.get(flow_name)
        if flow is None:
            raise ValueError(f"unknown flow: {flow_name!r} (expected one of {', '.join(FLOWS)})")

        # Never queue or merge: whatever was there before is discarded
        self.reset()
        self.state.flow = flow.key
        self._transition(sm.RUNNING)
        start = time.time()
        log("flow_started", flow=flow.key)

        try:
            for step in flow.steps:
                outcome = self._run_step(step)
                if not outcome.ok:
                    return self._abort(flow, step)

            self._transition(sm.COMPLETED)
            if flow.summary:
                self.reporter.report("Fluxo de Teste Completo", "Todas as etapas foram executadas com sucesso.")
            return self.state
        finally:
            log(
                "flow_finished",
                flow=flow.key,
                status=self.state.status,
                failedStage=self.state.failed_stage,
                durationMs=int((time.time() - start) * 1000),
            )
