"""Full HTML page: search box, facility listing and feedback form.

The listing is rendered server-side on first paint. Afterwards the inline
script re-requests ``/unidades/cards`` on each keystroke (optionally
debounced) and swaps the container content, keeping only the response to
the newest request. While the dataset is still loading (see
``data-dataset-status``) it polls the fragment until the load finishes.
It also toggles the name fields for the anonymous checkbox and posts the
feedback form as JSON instead of navigating.
"""
from facility_directory.services.facility_renderer import escape_text

_SCRIPT = """
<script>
(function () {
    const lista = document.getElementById('unidadesLista');
    const busca = document.getElementById('inputBusca');
    const form = document.getElementById('formFeedback');
    const anonimo = document.getElementById('anonimoCheck');
    const nome = document.getElementById('nome');
    const sobrenome = document.getElementById('sobrenome');
    const status = document.getElementById('feedbackStatus');
    const delay = parseInt(document.body.dataset.debounceMs || '0', 10);
    const POLL_MS = 1000;
    let timer = null;
    let seq = 0;

    async function atualizar(termo) {
        const atual = ++seq;
        try {
            const resp = await fetch('/unidades/cards?q=' + encodeURIComponent(termo));
            const html = await resp.text();
            if (atual !== seq) {
                return;  // a newer search already started
            }
            lista.innerHTML = html;
            lista.dataset.datasetStatus = resp.headers.get('X-Dataset-Status') || 'ready';
        } catch (err) {
            console.error('Erro ao atualizar unidades:', err);
        }
    }

    async function aguardarCarga() {
        if (lista.dataset.datasetStatus !== 'loading') {
            return;
        }
        await atualizar(busca.value);
        if (lista.dataset.datasetStatus === 'loading') {
            setTimeout(aguardarCarga, POLL_MS);
        }
    }

    aguardarCarga();

    busca.addEventListener('input', (e) => {
        const termo = e.target.value;
        if (delay > 0) {
            clearTimeout(timer);
            timer = setTimeout(() => atualizar(termo), delay);
        } else {
            atualizar(termo);
        }
    });

    anonimo.addEventListener('change', () => {
        const isAnonimo = anonimo.checked;
        nome.disabled = isAnonimo;
        sobrenome.disabled = isAnonimo;
        if (isAnonimo) {
            nome.value = '';
            sobrenome.value = '';
        }
    });

    form.addEventListener('submit', async (e) => {
        e.preventDefault();
        const dados = new FormData(form);
        const payload = {
            anonymous: anonimo.checked,
            first_name: dados.get('first_name') || null,
            last_name: dados.get('last_name') || null,
            email: dados.get('email') || null,
            message: dados.get('message') || ''
        };
        let resp;
        try {
            resp = await fetch('/feedback', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify(payload)
            });
        } catch (err) {
            status.textContent = 'Não foi possível enviar o feedback.';
            return;
        }
        status.textContent = resp.ok
            ? 'Feedback enviado. Obrigado!'
            : 'Não foi possível enviar o feedback.';
        if (resp.ok) {
            form.reset();
            nome.disabled = false;
            sobrenome.disabled = false;
        }
    });
})();
</script>
"""


def render_page(listing_html: str, term: str = "", debounce_ms: int = 0, status: str = "ready") -> str:
    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Unidades de Saúde</title>
    <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css">
    <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bootstrap-icons@1.11.3/font/bootstrap-icons.min.css">
</head>
<body data-debounce-ms="{int(debounce_ms)}">
<main class="container py-4">
    <h1 class="mb-4">Unidades de Saúde</h1>
    <input id="inputBusca" class="form-control mb-4" type="search"
           placeholder="Buscar por nome, bairro ou serviço" value="{escape_text(term)}">
    <div id="unidadesLista" class="row row-cols-1 row-cols-md-2 g-4" data-dataset-status="{escape_text(status)}">{listing_html}</div>

    <h2 class="mt-5">Feedback</h2>
    <form id="formFeedback" class="mt-3">
        <div class="form-check mb-2">
            <input class="form-check-input" type="checkbox" id="anonimoCheck" name="anonymous">
            <label class="form-check-label" for="anonimoCheck">Enviar anonimamente</label>
        </div>
        <div class="row g-2 mb-2">
            <div class="col"><input class="form-control" id="nome" name="first_name" placeholder="Nome"></div>
            <div class="col"><input class="form-control" id="sobrenome" name="last_name" placeholder="Sobrenome"></div>
        </div>
        <input class="form-control mb-2" id="email" name="email" type="email" placeholder="E-mail (opcional)">
        <textarea class="form-control mb-2" id="mensagem" name="message" rows="3" required></textarea>
        <button class="btn btn-primary" type="submit">Enviar</button>
        <p id="feedbackStatus" class="mt-2 text-muted"></p>
    </form>
</main>
{_SCRIPT}
</body>
</html>
"""
