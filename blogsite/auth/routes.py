"""
Auth Routes

User sign-up, sign-in and sign-out.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from flask_login import current_user

from blogsite.auth import auth_bp
from blogsite.auth.services import sign_up, sign_in, sign_out
from blogsite.errors import ValidationError, DuplicateUser, UnknownUser, InvalidCredentials

logger = logging.getLogger(__name__)


def _current_user():
    return current_user if current_user.is_authenticated else None


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """User registration route"""
    if request.method == 'POST':
        user_id = request.form.get('user_id', '')
        name = request.form.get('name', '')
        password = request.form.get('password', '')
        
        try:
            sign_up(user_id, name, password)
        except (ValidationError, DuplicateUser) as e:
            flash(str(e), 'danger')
            return render_template('signup.html', user=_current_user(),
                                   user_id=user_id, name=name), e.status_code
        
        flash('Registration successful! Please sign in.', 'success')
        return redirect(url_for('auth.signin'))
    
    return render_template('signup.html', user=_current_user())


@auth_bp.route('/signin', methods=['GET', 'POST'])
def signin():
    """User sign-in route"""
    if request.method == 'POST':
        user_id = request.form.get('user_id', '')
        password = request.form.get('password', '')
        
        try:
            user = sign_in(user_id, password)
        except (UnknownUser, InvalidCredentials) as e:
            logger.info('Failed sign-in for %s: %s', user_id, e)
            flash(str(e), 'danger')
            return render_template('signin.html', user=_current_user(),
                                   user_id=user_id), e.status_code
        
        flash(f'Welcome back, {user.name}!', 'success')
        next_page = request.args.get('next')
        if next_page and next_page.startswith('/') and not next_page.startswith('//'):
            return redirect(next_page)
        return redirect(url_for('blog.home'))
    
    return render_template('signin.html', user=_current_user())


@auth_bp.route('/signout')
def signout():
    """User sign-out route"""
    sign_out()
    return redirect(url_for('blog.home'))
