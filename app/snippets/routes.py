"""
Snippet Routes
"""

from flask import abort, current_app, flash, redirect, render_template, url_for
from app.auth.decorators import require_authentication
from app.forms import SnippetCreateForm
from app.services import NoRecordError, get_snippet, insert_snippet, latest_snippets
from app.snippets import snippets_bp

# Largest id a 64-bit INTEGER column can hold
MAX_ID = 2 ** 63 - 1


@snippets_bp.route('/')
def home():
    """Latest unexpired snippets"""
    snippets = latest_snippets(current_app.config['LATEST_SNIPPETS_LIMIT'])
    return render_template('home.html', snippets=snippets)


@snippets_bp.route('/snippet/view/<int:snippet_id>')
def view(snippet_id):
    """Show a single snippet; out-of-range ids and expired snippets are 404s."""
    if snippet_id < 1 or snippet_id > MAX_ID:
        abort(404)
    try:
        snippet = get_snippet(snippet_id)
    except NoRecordError:
        abort(404)
    return render_template('view.html', snippet=snippet)


@snippets_bp.route('/snippet/create', methods=['GET', 'POST'])
@require_authentication
def create():
    """Display the create form and store submitted snippets"""
    form = SnippetCreateForm()
    if not form.is_submitted():
        form.expires.data = 365

    if form.validate_on_submit():
        snippet_id = insert_snippet(form.title.data.strip(), form.content.data, form.expires.data)
        flash('Snippet successfully created!', 'success')
        return redirect(url_for('snippets.view', snippet_id=snippet_id), code=303)

    if form.is_submitted():
        return render_template('create.html', form=form), 422
    return render_template('create.html', form=form)
