"""
Blog Routes

Home listing plus the create, edit and delete forms. Mutating routes
require a signed-in user; edit and delete also require ownership.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user

from blogsite.blog import blog_bp
from blogsite.blog.services import (
    category_from_form,
    create_post,
    delete_post,
    edit_post,
    get_owned_post,
    list_categories,
    list_posts,
)
from blogsite.errors import ValidationError


def _current_user():
    return current_user if current_user.is_authenticated else None


@blog_bp.route('/')
def home():
    """All posts, newest first, with the category list"""
    return render_template('home.html',
                           blog_posts=list_posts(),
                           categories=list_categories(),
                           user=_current_user())


@blog_bp.route('/create-post', methods=['GET', 'POST'])
@login_required
def create():
    """Create post form and submission"""
    if request.method == 'POST':
        title = request.form.get('title', '')
        content = request.form.get('content', '')
        category_name = category_from_form(request.form)
        
        try:
            create_post(title, content, category_name, current_user)
        except ValidationError as e:
            flash(str(e), 'danger')
            return render_template('create_post.html',
                                   categories=list_categories(),
                                   user=current_user,
                                   form=request.form), 400
        
        flash('Post created.', 'success')
        return redirect(url_for('blog.home'))
    
    return render_template('create_post.html',
                           categories=list_categories(),
                           user=current_user,
                           form={})


@blog_bp.route('/edit/<int:post_id>', methods=['GET', 'POST'])
@login_required
def edit(post_id):
    """Edit form for the post's creator"""
    if request.method == 'POST':
        title = request.form.get('title', '')
        content = request.form.get('content', '')
        category_name = category_from_form(request.form)
        
        try:
            edit_post(post_id, title, content, category_name, current_user)
        except ValidationError as e:
            flash(str(e), 'danger')
            return render_template('edit_post.html',
                                   post=get_owned_post(post_id, current_user),
                                   categories=list_categories(),
                                   user=current_user,
                                   form=request.form), 400
        
        flash('Post updated.', 'success')
        return redirect(url_for('blog.home'))
    
    post = get_owned_post(post_id, current_user)
    return render_template('edit_post.html',
                           post=post,
                           categories=list_categories(),
                           user=current_user,
                           form={})


@blog_bp.route('/delete/<int:post_id>', methods=['POST'])
@login_required
def delete(post_id):
    """Delete a post owned by the current user"""
    delete_post(post_id, current_user)
    flash('Post deleted.', 'info')
    return redirect(url_for('blog.home'))
